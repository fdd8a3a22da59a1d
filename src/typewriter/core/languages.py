_LANGUAGE_ALIASES = {
    "flow": "flow",
    "flowtype": "flow",
    "javascript": "flow",
    "js": "flow",
    "ts": "typescript",
    "typescript": "typescript",
}

_NUMERIC_TYPES = {
    "byte",
    "complex64",
    "complex128",
    "float32",
    "float64",
    "int",
    "int8",
    "int16",
    "int32",
    "int64",
    "rune",
    "uint",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "uintptr",
}

_NATIVE_TYPES = {
    "flow": {
        "bool": "boolean",
        "string": "string",
        "[]byte": "string",
        "time.Time": "string",
        "interface{}": "any",
        "any": "any",
        "error": "string",
    },
    "typescript": {
        "bool": "boolean",
        "string": "string",
        "[]byte": "string",
        "time.Time": "string",
        "interface{}": "any",
        "any": "any",
        "error": "string",
    },
}


def normalize_language(language: str) -> str:
    """Resolve a language alias. Unknown names are returned lower-cased."""
    normalized = language.strip().lower()
    return _LANGUAGE_ALIASES.get(normalized, normalized)


def native_type(go_type: str, language: str) -> str:
    """Map a Go basic type name to its equivalent in ``language``.

    Names without a mapping (custom types) and types of languages without a
    mapping table are returned unchanged.
    """
    mapping = _NATIVE_TYPES.get(normalize_language(language))
    if mapping is None:
        return go_type
    if go_type in _NUMERIC_TYPES:
        return "number"
    return mapping.get(go_type, go_type)
