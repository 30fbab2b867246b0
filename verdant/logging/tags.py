# verdant/logging/tags.py
"""
Subsystem tags prefixed to log messages so output stays searchable.
"""

INGEST = "[INGEST]"
NORMALIZE = "[NORMALIZE]"
STRUCTURE = "[STRUCTURE]"
DEDUPE = "[DEDUPE]"
LEXICAL = "[LEXICAL]"
CHUNKING = "[CHUNKING]"
RENDER = "[RENDER]"
PIPELINE = "[PIPELINE]"
STATS = "[STATS]"
CLI = "[CLI]"
