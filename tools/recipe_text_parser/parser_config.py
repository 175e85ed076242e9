from __future__ import annotations

import os
from pathlib import Path


def _env_float(name: str, default: float) -> float:
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


TOOL_DIR = Path(__file__).resolve().parent
DEFAULT_REGRESSION_DIR = Path(os.environ.get("RECIPE_PARSER_REGRESSION_DIR") or (TOOL_DIR / "fixtures" / "regression"))

# Below this share of distinct tokens a line counts as repeated-word noise.
MIN_UNIQUE_WORD_RATIO = _env_float("RECIPE_PARSER_MIN_UNIQUE_WORD_RATIO", 0.5)
MIN_LETTER_RATIO = _env_float("RECIPE_PARSER_MIN_LETTER_RATIO", 0.2)
MIN_DESCRIPTION_LENGTH = 5
MIN_FALLBACK_TITLE_LENGTH = 3

SECTIONS = ("unknown", "title", "description", "ingredients", "instructions")
CATEGORIES = ("marinade", "seasoning", "dish")
DEFAULT_CATEGORY = "dish"

PROCEDURE_HEADERS = {"procedures", "procedure"}
MARINADE_HEADERS = {"marinades", "marinade"}
SEASONING_HEADERS = {"seasonings", "seasoning"}
SEASONING_HEADER_CJK = "調味料"
INGREDIENT_HEADER_TOKENS = ("ingredient", "ingredients", "材料")
INSTRUCTION_HEADER_TOKENS = ("instruction", "step", "method", "directions")
TITLE_HINT_TOKENS = ("recipe", "dish", "menu")
DONE_TOKEN = "done"

UNIT_VOCABULARY: tuple[str, ...] = (
    "tsp",
    "tbsp",
    "tablespoon",
    "teaspoon",
    "cup",
    "cups",
    "oz",
    "ounce",
    "ounces",
    "lb",
    "pound",
    "pounds",
    "g",
    "gram",
    "grams",
    "kg",
    "kilogram",
    "kilograms",
    "ml",
    "milliliter",
    "milliliters",
    "l",
    "liter",
    "liters",
    "pinch",
    "pinches",
    "dash",
    "dashes",
    "piece",
    "pieces",
    "pcs",
    "pc",
    "slice",
    "slices",
    "clove",
    "cloves",
    "bunch",
    "bunches",
    "head",
    "heads",
    "strand",
    "strands",
)

# Order matters: "kg" must be split before "g", "tbsp" after "tsp" is harmless.
GLUED_UNIT_ABBREVIATIONS = ("ml", "kg", "g", "l", "tsp", "tbsp", "oz", "lb")

TITLE_CASE_STOP_WORDS = {
    "tsp",
    "tbsp",
    "cup",
    "cups",
    "oz",
    "lb",
    "g",
    "kg",
    "ml",
    "l",
    "of",
    "a",
    "an",
    "the",
    "with",
    "and",
    "or",
}

# Digit + unit, used for "has a measurement" decisions.
SHORT_MEASUREMENT_UNITS = (
    "tbsp",
    "tsp",
    "cup",
    "cups",
    "oz",
    "lb",
    "g",
    "kg",
    "ml",
    "l",
    "tablespoon",
    "teaspoon",
)

MEASUREMENT_UNITS = SHORT_MEASUREMENT_UNITS + (
    "piece",
    "pieces",
    "slice",
    "slices",
    "clove",
    "cloves",
    "bunch",
    "bunches",
    "head",
    "heads",
    "strand",
    "strands",
    "pinch",
    "pinches",
    "dash",
    "dashes",
)

INGREDIENT_UNIT_KEYWORDS = ("cup", "tbsp", "tsp", "oz", "lb", "gram", "kg", "ml", "liter")

# Substrings that disqualify a line from being a descriptive ingredient note.
NOTE_BLOCKING_UNIT_TOKENS = ("tsp", "tbsp", "cup", "oz", "lb", "g", "kg", "ml", "l", "piece", "slice", "clove")
PARENTHETICAL_BLOCKING_UNIT_TOKENS = ("tsp", "tbsp", "cup")
NOTE_ACTION_WORDS = ("slice", "juice", "grind", "cut", "dice", "chop", "mince", "grate", "peel", "trim")

ACTION_VERBS: tuple[str, ...] = (
    "heat",
    "add",
    "mix",
    "stir",
    "cook",
    "bake",
    "roast",
    "grill",
    "fry",
    "saute",
    "steam",
    "boil",
    "simmer",
    "braise",
    "combine",
    "whisk",
    "beat",
    "fold",
    "knead",
    "roll",
    "cut",
    "slice",
    "dice",
    "chop",
    "mince",
    "grate",
    "peel",
    "core",
    "seed",
    "trim",
    "marinate",
    "season",
    "taste",
    "preheat",
    "warm",
    "cool",
    "chill",
    "freeze",
    "thaw",
    "defrost",
    "rest",
    "serve",
    "garnish",
    "decorate",
    "plate",
    "present",
    "drizzle",
    "pour",
    "sprinkle",
    "dust",
    "coat",
    "place",
    "put",
    "set",
    "bring",
    "remove",
    "take",
    "get",
    "use",
    "prepare",
    "make",
    "create",
    "arrange",
    "layer",
    "spread",
)

INSTRUCTION_STARTERS = (
    "preheat",
    "mix",
    "add",
    "remove",
    "bake",
    "cook",
    "fry",
    "stir",
    "combine",
    "season",
    "heat",
    "place",
    "put",
    "set",
    "bring",
    "boil",
    "simmer",
    "grill",
    "roast",
)

INSTRUCTION_LEAD_KEYWORDS = ("step", "method", "direction", "first", "next", "then", "finally")

# Prefix/infix words that mark a line as recipe structure during validity checks.
INSTRUCTION_STRUCTURE_KEYWORDS = (
    "step",
    "first",
    "next",
    "then",
    "finally",
    "add",
    "remove",
    "place",
    "put",
    "take",
    "get",
    "use",
    "combine",
    "mix",
    "stir",
)

COOKING_ACTION_WORDS = (
    "cook",
    "bake",
    "roast",
    "grill",
    "fry",
    "saute",
    "steam",
    "boil",
    "simmer",
    "stir",
    "mix",
    "blend",
    "whisk",
    "cut",
    "slice",
    "dice",
    "chop",
    "mince",
    "grate",
    "peel",
    "marinate",
    "season",
    "heat",
    "preheat",
    "serve",
    "garnish",
    "drizzle",
    "pour",
    "sprinkle",
)

FOOD_KEYWORDS: tuple[str, ...] = (
    # ingredients
    "chicken", "beef", "pork", "fish", "seafood", "shrimp", "salmon", "tuna", "lamb", "turkey",
    "duck", "goose", "rice", "noodle", "pasta", "bread", "flour", "sugar", "salt", "pepper",
    "garlic", "onion", "tomato", "potato", "carrot", "celery", "chili", "ginger", "herb", "spice",
    "oil", "butter", "milk", "cream", "cheese", "egg", "yogurt", "sauce", "soy", "vinegar",
    "lemon", "lime", "orange", "apple", "banana", "berry", "fruit", "vegetable", "lettuce",
    "cucumber", "zucchini", "eggplant", "mushroom", "spinach", "broccoli", "cauliflower",
    "bean", "lentil", "chickpea", "tofu", "tempeh", "nut", "almond", "walnut", "peanut",
    "sesame", "coconut", "avocado", "olive", "basil", "oregano", "thyme", "rosemary", "parsley",
    "cilantro", "mint", "dill", "sage", "bay", "cumin", "coriander", "turmeric", "paprika",
    "cinnamon", "nutmeg", "clove", "cardamom", "star anise", "fennel", "mustard", "honey",
    "maple", "molasses", "syrup", "jam", "jelly", "marmalade", "chocolate", "cocoa", "vanilla",
    # cooking methods
    "cook", "bake", "roast", "grill", "fry", "saute", "steam", "boil", "simmer", "braise",
    "stir", "mix", "blend", "whisk", "beat", "fold", "knead", "roll", "cut", "slice", "dice",
    "chop", "mince", "grate", "peel", "core", "seed", "trim", "marinate", "season", "taste",
    "preheat", "heat", "warm", "cool", "chill", "freeze", "thaw", "defrost", "rest", "serve",
    "garnish", "decorate", "plate", "present", "drizzle", "pour", "sprinkle", "dust", "coat",
    # recipe structure
    "ingredient", "instruction", "step", "method", "preparation", "cooking time", "serving",
    "portion", "serves", "yield", "recipe", "dish", "meal", "course", "appetizer", "entree",
    "main", "dessert", "snack", "breakfast", "lunch", "dinner", "brunch", "supper",
    "材料", "調味料",
    # units
    "cup", "tablespoon", "teaspoon", "ounce", "pound", "gram", "kilogram", "milliliter", "liter",
    "piece", "slice", "clove", "bunch", "head", "strand", "pinch", "dash", "drop",
    # descriptors
    "fresh", "dried", "frozen", "canned", "organic", "raw", "cooked", "roasted", "grilled",
    "fried", "steamed", "boiled", "baked", "crispy", "tender", "juicy", "flavorful", "aromatic",
    "spicy", "sweet", "sour", "bitter", "salty", "umami", "savory", "rich", "light", "heavy",
    # asian pantry
    "wok", "stir-fry", "dim sum", "dumpling", "oyster", "hoisin",
    "szechuan", "sichuan", "cantonese", "spring onion", "scallion", "bok choy", "napa",
)

COMPOUND_FOOD_PHRASES = ("sesame oil", "olive oil", "coconut oil", "vegetable oil", "cooking oil")

NON_FOOD_KEYWORDS: tuple[str, ...] = (
    # technology
    "computer", "phone", "laptop", "software", "hardware", "internet", "website", "email",
    "document", "file", "folder", "application", "program", "code", "programming", "developer",
    "business", "meeting", "office", "work", "job", "career", "company", "corporation",
    # vehicles
    "vehicle", "car", "truck", "bike", "motorcycle", "airplane", "train", "bus", "taxi",
    # buildings and furniture
    "building", "house", "apartment", "room", "furniture", "chair", "table", "desk", "bed",
    "clothing", "shirt", "pants", "shoes", "jacket", "dress", "suit", "uniform",
    # animals as pets
    "animal", "dog", "cat", "bird", "pet", "wildlife", "zoo",
    # sports and media
    "sport", "game", "player", "team", "coach", "stadium", "ball", "racket",
    "music", "song", "album", "artist", "concert", "instrument", "guitar", "piano",
    "movie", "film", "actor", "actress", "director", "cinema", "theater",
    "book", "novel", "author", "writer", "publisher", "library",
    # academia and medicine
    "school", "university", "college", "student", "teacher", "professor", "class",
    "medicine", "doctor", "hospital", "patient", "treatment", "surgery", "disease",
    # machinery
    "machine", "engine", "motor", "battery", "wire", "cable", "plug", "socket",
)

FOOD_CONTEXT_EXCEPTIONS = {"chicken", "turkey", "duck", "goose"}

GARBAGE_PATTERNS: tuple[str, ...] = (
    r"^[#*°]{2,}",
    r"^\d+[#*°]+$",
    r"^[A-Z]{1,3}\d+/?\d*[#*°]*$",
    r"^[#*°]+\d+",
    r"^\d+/\d+[#*°]+",
    r"^[#*°]{1,2}$",
    r"^[A-Za-z][#*°]+\s*$",
    r"^[A-Z][#*°]+\s",
    # OCR artifact seen on scanned menus ("2ban").
    r"\b\d+ban\b",
    r"^[A-Z][a-z]+,\s*[A-Z][a-z]+\s+[A-Z][a-z]+",
)
