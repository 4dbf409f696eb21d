from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
RAW_SQUAD_DIR = DATA_DIR / "raw"
PROCESSED_SQUAD_DIR = DATA_DIR / "processed"

# In-game attribute scale
ATTRIBUTE_MIN = 1
ATTRIBUTE_MAX = 20

# Identity / ability columns of a squad export (everything else is an attribute)
REQUIRED_COLUMNS = ("Name", "Age")
IDENTITY_COLUMNS = ("UID", "ID", "Name", "Age", "CA", "PA", "Position")

# FM squad-view column headers -> full attribute names
ATTRIBUTE_ABBREVIATIONS = {
    "1v1": "One on Ones",
    "Acc": "Acceleration",
    "Aer": "Aerial Reach",
    "Agg": "Aggression",
    "Agi": "Agility",
    "Ant": "Anticipation",
    "Bal": "Balance",
    "Bra": "Bravery",
    "Cmd": "Command of Area",
    "Cmp": "Composure",
    "Cnt": "Concentration",
    "Com": "Communication",
    "Cor": "Corners",
    "Cro": "Crossing",
    "Dec": "Decisions",
    "Det": "Determination",
    "Dri": "Dribbling",
    "Ecc": "Eccentricity",
    "Fin": "Finishing",
    "Fir": "First Touch",
    "Fla": "Flair",
    "Fre": "Free Kick Taking",
    "Han": "Handling",
    "Hea": "Heading",
    "Jum": "Jumping Reach",
    "Kic": "Kicking",
    "L Th": "Long Throws",
    "Ldr": "Leadership",
    "Lon": "Long Shots",
    "Mar": "Marking",
    "Nat": "Natural Fitness",
    "OtB": "Off the Ball",
    "Pac": "Pace",
    "Pas": "Passing",
    "Pen": "Penalty Taking",
    "Pos": "Positioning",
    "Pun": "Tendency to Punch",
    "Ref": "Reflexes",
    "Sta": "Stamina",
    "Str": "Strength",
    "TRO": "Rushing Out",
    "Tck": "Tackling",
    "Tea": "Teamwork",
    "Tec": "Technique",
    "Thr": "Throwing",
    "Vis": "Vision",
    "Wor": "Work Rate",
}

# Output file names (use .format(name=...))
SQUAD_FILE_PATTERN = "squad_{name}.json"
LATEST_SQUAD_LINK = "squad_latest.json"
