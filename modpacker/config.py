from __future__ import annotations

APP_NAME = "Mod Packer"
APP_VERSION = "1.0.0"

# Folder names the engine reads as loose asset buckets (compared lower-cased).
LOOSE_CATEGORIES = frozenset({"effects", "interface", "meshes", "strings", "terrain", "textures"})

STRINGS_FOLDER = "strings"
TEXTURES_FOLDER = "textures"

ARCHIVER_EXE_DEFAULT = "Archive2.exe"
ARCHIVER_PROBE_ARGS = ("-?",)
ARCHIVER_PROBE_TOKEN = "Archive2"
ARCHIVE_EXT_DEFAULT = "ba2"
FORMAT_GENERAL = "General"
FORMAT_TEXTURES = "DDS"

SETTINGS_DIRNAME = ".modpacker"
SETTINGS_FILENAME = "settings.json"
