ERRORS = {
  "E_INPUT_READ": "Input file could not be read",
  "E_NO_STRUCTURE": "Data does not follow the mON structure",
  "E_INCOMPLETE": "Data ends before a record is complete",
  "E_BAD_STRUCTURE": "Record field is malformed",
  "E_NO_CONTENT": "Content of length 0 cannot be parsed",
}

# Nesting levels `decode --expand` re-parses before leaving content opaque
DEFAULT_MAX_EXPAND_DEPTH = 64
