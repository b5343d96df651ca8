# scrubbing/core/definitions.py

"""Names of the built-in patterns shipped in patterns.yaml."""


class PatternName:
    """Constants naming the built-in pattern library entries."""

    # Whitespace
    WHITESPACE_COMPACT = "WhitespaceCompact"
    WHITESPACE_ENDS = "WhitespaceEnds"
    WHITESPACE_BEGIN = "WhitespaceBegin"
    WHITESPACE_END = "WhitespaceEnd"

    # Contact data
    SINGLE_EMAIL_MASK = "SingleEmailMask"
    EMAIL = "Email"

    # Markup and character classes
    NON_ASCII = "NonAscii"
    TAGS_SIMPLE = "TagsSimple"
    SCRIPT_TAGS = "ScriptTags"

    # Numeric literals
    EN_NUMBER = "ENNumber"
    EU_NUMBER = "EUNumber"
    UNI_NUMBER = "UniNumber"

    ALL = (
        WHITESPACE_COMPACT,
        WHITESPACE_ENDS,
        WHITESPACE_BEGIN,
        WHITESPACE_END,
        SINGLE_EMAIL_MASK,
        EMAIL,
        NON_ASCII,
        TAGS_SIMPLE,
        SCRIPT_TAGS,
        EN_NUMBER,
        EU_NUMBER,
        UNI_NUMBER,
    )
