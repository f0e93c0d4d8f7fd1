"""
BMFont Atlas - Parse AngelCode BMFont text descriptors into glyph atlas data.

Modules:
    core: Descriptor reading, parsing, writing, and export/import
    text: Glyph lookup and text layout on top of parsed fonts
    texture: Texture page checks
"""

__version__ = "1.0.0"
__license__ = "MIT"
