"""String, character, memory, list and formatting helpers."""