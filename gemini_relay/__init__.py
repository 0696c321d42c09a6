# Gemini relay package.
# HTTP pass-through to Gemini plus the text helpers around it.

__version__ = "0.3.0"
