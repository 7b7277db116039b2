# config.py
import os
from dotenv import load_dotenv

load_dotenv()

# --- Graphical tree rendering ---
TREE_FONT_NAME = os.getenv("TREE_FONT_NAME", "Helvetica")
TREE_FONT_SIZE = int(os.getenv("TREE_FONT_SIZE", "11"))

PARSE_TREE_IMAGE_DIR = os.getenv("PARSE_TREE_IMAGE_DIR", os.path.join("static", "parse_trees"))
PARSE_TREE_IMAGE_FORMAT = os.getenv("PARSE_TREE_IMAGE_FORMAT", "png")
