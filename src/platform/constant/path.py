from pathlib import Path


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent

# Log directory
LOG_DIR = BASE_DIR / 'logs'

# Journey submission log directory
DATA_DIR = BASE_DIR / 'data'

# Front-end pages (stage, passport, admin) and shared content (logos, media)
PUBLIC_DIR = BASE_DIR / 'public'
CONTENT_DIR = BASE_DIR / 'content'
