"""Constants for the spdexer header tool."""

# Go is the only language handled; the file suffix and the declaration
# prefix are the two anchors of header detection.
SOURCE_SUFFIX = ".go"
DECLARATION_PREFIX = "package "
COMMENT_PREFIX = "//"

DEFAULT_LICENSE = "GPL30ORLATER"
DEFAULT_FILE_MODE = 0o644

# Template placeholders, in the order the CLI asks for them.
PLACEHOLDERS = ("name", "author", "year")
