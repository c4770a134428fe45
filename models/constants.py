"""
Positions, pitch types and generation tables for College Baseball Coach.
Positions, hands and pitch types are plain strings; every table below is keyed by them.
"""
from typing import Dict

# Specific fielding positions (one position rating per entry)
POSITIONS = [
    "C", "1B", "2B", "3B", "SS",
    "LF", "CF", "RF", "DH",
    "SP", "RP", "CP",
]

POSITION_NAMES: Dict[str, str] = {
    "C": "Catcher",
    "1B": "First Base",
    "2B": "Second Base",
    "3B": "Third Base",
    "SS": "Shortstop",
    "LF": "Left Field",
    "CF": "Center Field",
    "RF": "Right Field",
    "DH": "Designated Hitter",
    "SP": "Starting Pitcher",
    "RP": "Relief Pitcher",
    "CP": "Closing Pitcher",
}

# Broad categories a preferred position may be recorded as (never generated)
BROAD_POSITIONS = ["IF", "OF", "CIF", "MIF", "BAT", "P", "UTIL"]

PITCHER_POSITIONS = ("SP", "RP", "CP")
INFIELD_POSITIONS = ("1B", "2B", "SS", "3B")
OUTFIELD_POSITIONS = ("LF", "CF", "RF")

HAND_LEFT = "Left"
HAND_RIGHT = "Right"
HAND_SWITCH = "Switch"  # batting only

CLASS_YEARS = [
    "Freshman", "Sophomore", "Junior", "Senior",
    "Redshirt Freshman", "Redshirt Sophomore", "Redshirt Junior", "Redshirt Senior",
]

# Age on the reference date for each class year
CLASS_YEAR_AGES: Dict[str, int] = {
    "Freshman": 18,
    "Sophomore": 19,
    "Junior": 20,
    "Senior": 21,
    "Redshirt Freshman": 19,
    "Redshirt Sophomore": 20,
    "Redshirt Junior": 21,
    "Redshirt Senior": 22,
}

# Class-year mix on an existing roster
CLASS_YEAR_WEIGHTS: Dict[str, float] = {
    "Freshman": 0.28,
    "Sophomore": 0.25,
    "Junior": 0.22,
    "Senior": 0.17,
    "Redshirt Freshman": 0.03,
    "Redshirt Sophomore": 0.02,
    "Redshirt Junior": 0.02,
    "Redshirt Senior": 0.01,
}

# --- Pitches ---

FASTBALL = "FF"
PITCH_TYPES = ["FF", "CH", "CU", "FC", "EP", "FO", "KN", "KC", "SC", "SI", "SL", "SV", "FS", "ST"]

PITCH_NAMES: Dict[str, str] = {
    "FF": "Four-Seam Fastball",
    "CH": "Changeup",
    "CU": "Curveball",
    "FC": "Cutter",
    "EP": "Eephus",
    "FO": "Forkball",
    "KN": "Knuckleball",
    "KC": "Knuckle-curve",
    "SC": "Screwball",
    "SI": "Sinker",
    "SL": "Slider",
    "SV": "Slurve",
    "FS": "Splitter",
    "ST": "Sweeper",
}

# Secondary pitch selection weights (uniform: every non-fastball type equally likely)
SECONDARY_PITCH_WEIGHTS: Dict[str, float] = {p: 1.0 for p in PITCH_TYPES if p != FASTBALL}

# Velocity as a percentage of fastball mph: (lo, hi) inclusive
PITCH_VELOCITY_PERCENT: Dict[str, tuple[int, int]] = {
    "SL": (75, 85), "CU": (75, 85), "KC": (75, 85),   # breaking balls
    "CH": (80, 90), "FS": (80, 90), "SC": (80, 90),   # offspeed
    "FC": (90, 95), "SI": (90, 95),                   # movement fastballs
    "EP": (60, 70), "KN": (60, 70),                   # very slow
}
DEFAULT_VELOCITY_PERCENT: tuple[int, int] = (75, 90)

FASTBALL_MPH_RANGE: tuple[int, int] = (85, 95)
FASTBALL_MPH_BOUNDS: tuple[int, int] = (80, 102)

# --- Talent ---

STAR_RATINGS = (1, 2, 3, 4, 5)

# stars -> (gem_chance, bust_chance). Low-star recruits bust far more often than they boom.
GEM_BUST_CHANCES: Dict[int, tuple[float, float]] = {
    5: (0.10, 0.10),
    4: (0.10, 0.10),
    3: (0.10, 0.10),
    2: (0.15, 0.30),
    1: (0.20, 0.60),
}

# Gem/bust magnitude in stars
TALENT_OFFSET_WEIGHTS: Dict[int, float] = {1: 0.75, 2: 0.20, 3: 0.05}

# Perfect Game grade range by nominal stars
PERFECT_GAME_RANGES: Dict[int, tuple[float, float]] = {
    5: (9.5, 10.0),
    4: (8.0, 10.0),
    3: (7.5, 9.5),
    2: (6.5, 9.0),
    1: (6.0, 8.5),
}

# Open-market star mix for a recruiting class (ascending star order matters for the sampler)
RECRUITING_CLASS_STAR_WEIGHTS: Dict[int, float] = {
    1: 0.20,
    2: 0.30,
    3: 0.35,
    4: 0.12,
    5: 0.03,
}

# Team roster: weight_s *= PRESTIGE_TILT ** (((prestige - 50) / 50) * (s - 3))
PRESTIGE_TILT = 4.0
PRESTIGE_RANGE: tuple[int, int] = (0, 100)

# --- Attribute base ranges: category -> (min_start, min_step, max_start, max_step) ---

ATTRIBUTE_BASE_RANGES: Dict[str, tuple[int, int, int, int]] = {
    "mental": (30, 5, 50, 7),
    "batting": (30, 8, 50, 10),
    "fielding": (30, 8, 50, 10),
    "pitching": (40, 8, 60, 8),
}
# Position players still get a token pitching profile
NON_PITCHER_PITCHING_RANGE: tuple[int, int] = (10, 30)

RATING_MIN = 1
RATING_MAX = 99

MENTAL_ATTRIBUTES: tuple[str, ...] = (
    "ego", "confidence", "composure", "greed", "coachability", "work_ethic", "loyalty",
    "intelligence", "aggressiveness", "integrity", "leadership", "adaptability", "recovery",
)
BATTING_ATTRIBUTES: tuple[str, ...] = (
    "contact_vs_left", "contact_vs_right", "power_vs_left", "power_vs_right",
    "eye", "discipline", "defensiveness", "ground_ball_rate", "bunting_skill",
)
FIELDING_ATTRIBUTES: tuple[str, ...] = (
    "speed", "stealing_ability", "fielding_range", "arm_strength", "arm_accuracy",
    "handling", "blocking",
)
PITCHING_ATTRIBUTES: tuple[str, ...] = ("stamina", "hold_runners")

SKILL_ATTRIBUTES: tuple[str, ...] = (
    MENTAL_ATTRIBUTES + BATTING_ATTRIBUTES + FIELDING_ATTRIBUTES + PITCHING_ATTRIBUTES
)

# --- Biography ---

# Preferred-position mix for open recruiting
POSITION_WEIGHTS: Dict[str, float] = {
    "C": 0.08, "1B": 0.06, "2B": 0.07, "3B": 0.06, "SS": 0.08,
    "LF": 0.06, "CF": 0.07, "RF": 0.06, "DH": 0.06,
    "SP": 0.22, "RP": 0.14, "CP": 0.04,
}

# Roster fill order (position, count); slots beyond the template use POSITION_WEIGHTS
ROSTER_POSITION_TEMPLATE: list[tuple[str, int]] = [
    ("SP", 5), ("RP", 7), ("CP", 2),
    ("C", 3), ("1B", 2), ("2B", 2), ("SS", 2), ("3B", 2),
    ("LF", 2), ("CF", 2), ("RF", 2), ("DH", 1),
]

# Height (inches) mean by position; everyone else uses DEFAULT_HEIGHT_MEAN
HEIGHT_MEANS: Dict[str, int] = {
    "1B": 74, "SP": 74,   # 6'2"
    "RP": 73, "CP": 73,
    "C": 70, "2B": 70,    # 5'10"
    "SS": 71,
}
DEFAULT_HEIGHT_MEAN = 72
HEIGHT_STD_DEV = 3
HEIGHT_RANGE: tuple[int, int] = (66, 79)    # 5'6" to 6'7"
WEIGHT_STD_DEV = 15
WEIGHT_RANGE: tuple[int, int] = (150, 250)

# Size classes drive the batting/fielding cross terms
LARGE_BUILD_MIN: tuple[int, int] = (74, 200)   # height >= 74 and weight >= 200
SMALL_BUILD_MAX: tuple[int, int] = (70, 180)   # height <= 70 and weight <= 180

LEFT_THROW_CHANCE = 0.2
# throwing hand -> batting hand distribution
BATTING_HAND_GIVEN_THROW: Dict[str, Dict[str, float]] = {
    HAND_LEFT: {HAND_LEFT: 0.70, HAND_SWITCH: 0.20, HAND_RIGHT: 0.10},
    HAND_RIGHT: {HAND_RIGHT: 0.80, HAND_LEFT: 0.15, HAND_SWITCH: 0.05},
}

NATIONALITY_WEIGHTS: Dict[str, float] = {
    "American": 0.87,
    "Canadian": 0.05,
    "Cuban": 0.01,
    "Puerto Rican": 0.01,
    "Dominican": 0.01,
    "Japanese": 0.01,
    "Korean": 0.01,
    "Australian": 0.01,
    "Italian": 0.01,
    "Czech": 0.01,
}

US_STATES = [
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
    "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
    "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
    "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
    "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
]

US_TOWNS = [
    "Springfield", "Riverside", "Fairview", "Franklin", "Greenville", "Bristol", "Clinton",
    "Georgetown", "Madison", "Salem", "Oakland", "Ashland", "Burlington", "Milton",
    "Jackson", "Centerville", "Newport", "Dover", "Lexington", "Marion", "Oxford",
    "Hudson", "Kingston", "Lakewood", "Mount Vernon", "Plymouth", "Shelby", "Winchester",
]

# nationality -> [(hometown, state/province/country)]
FOREIGN_HOMETOWNS: Dict[str, list[tuple[str, str]]] = {
    "Canadian": [("Toronto", "ON"), ("Vancouver", "BC"), ("Calgary", "AB"), ("Montreal", "QC"), ("Winnipeg", "MB")],
    "Cuban": [("Havana", "Cuba"), ("Santiago de Cuba", "Cuba"), ("Cienfuegos", "Cuba")],
    "Puerto Rican": [("San Juan", "PR"), ("Ponce", "PR"), ("Mayaguez", "PR")],
    "Dominican": [("Santo Domingo", "Dominican Republic"), ("San Pedro de Macoris", "Dominican Republic")],
    "Japanese": [("Osaka", "Japan"), ("Yokohama", "Japan"), ("Sendai", "Japan")],
    "Korean": [("Seoul", "South Korea"), ("Busan", "South Korea"), ("Incheon", "South Korea")],
    "Australian": [("Sydney", "NSW"), ("Brisbane", "QLD"), ("Perth", "WA")],
    "Italian": [("Nettuno", "Italy"), ("Bologna", "Italy"), ("Parma", "Italy")],
    "Czech": [("Prague", "Czech Republic"), ("Brno", "Czech Republic"), ("Ostrava", "Czech Republic")],
}

HIGH_SCHOOL_SUFFIXES = [
    "High School", "Senior High", "Academy", "Prep", "Catholic", "Christian Academy",
]

PREVIOUS_SCHOOLS = [
    "Santa Fe CC", "San Jacinto College", "Chipola College", "McLennan CC", "Walters State CC",
    "Central Arizona College", "Iowa Western CC", "Wabash Valley College", "Crowder College",
    "Grayson College", "Cowley College", "Seminole State College",
]
TRANSFER_CHANCE = 0.08

FIRST_NAMES = [
    "James", "John", "Robert", "Michael", "William", "David", "Richard", "Joseph", "Thomas", "Charles",
    "Christopher", "Daniel", "Matthew", "Anthony", "Mark", "Steven", "Andrew", "Joshua", "Kevin", "Brian",
    "Ryan", "Jacob", "Tyler", "Brandon", "Justin", "Austin", "Cole", "Chase", "Blake", "Carson",
    "Jose", "Luis", "Carlos", "Miguel", "Diego", "Mateo", "Kenji", "Hiro", "Min-jun", "Liam",
    "Noah", "Ethan", "Logan", "Mason", "Caleb", "Hunter", "Gavin", "Landon", "Bryce", "Trey",
]
LAST_NAMES = [
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis", "Rodriguez", "Martinez",
    "Hernandez", "Lopez", "Wilson", "Anderson", "Thomas", "Taylor", "Moore", "Jackson", "Martin", "Lee",
    "Thompson", "White", "Harris", "Clark", "Lewis", "Robinson", "Walker", "Young", "Allen", "King",
    "Wright", "Scott", "Torres", "Nguyen", "Hill", "Flores", "Green", "Adams", "Nelson", "Baker",
    "Ramirez", "Campbell", "Parker", "Evans", "Tanaka", "Suzuki", "Kim", "Park", "Rossi", "Novak",
]

JERSEY_NUMBER_RANGE: tuple[int, int] = (0, 99)

# --- Position ratings ---

PREFERRED_RATING_BASE = 40
PREFERRED_RATING_STEP = 10
RELATED_POSITION_FACTOR = 0.8

RELATED_POSITIONS: Dict[str, tuple[str, ...]] = {
    "1B": ("3B", "LF", "RF"),
    "2B": ("SS", "3B"),
    "SS": ("2B", "3B"),
    "3B": ("1B", "SS"),
    "LF": ("CF", "RF"),
    "CF": ("LF", "RF"),
    "RF": ("LF", "CF"),
    "C": ("1B",),
    "DH": ("1B", "LF", "RF"),
    "SP": ("RP",),
    "RP": ("CP", "SP"),
    "CP": ("RP",),
}
