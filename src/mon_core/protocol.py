"""mON protocol constants.

Single source of truth for the delimiters and text encoding of the format.
Keep this file stable. Scanner and serializer must remain synchronized.
"""

# Field delimiters
NAME_DELIM = b"|"    # ends the name field
LENGTH_DELIM = b"~"  # ends the length field

# Encoding applied to str names and str content
TEXT_ENCODING = "utf-8"
