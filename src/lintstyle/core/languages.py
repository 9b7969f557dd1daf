from pathlib import Path

from pydantic import BaseModel, ConfigDict

DEFAULT_LANGUAGE = "javascript"
GENERIC_LANGUAGE = "generic"


class LanguageProfile(BaseModel):
    """Lexical and declaration policy for one bracket-and-quote language."""

    model_config = ConfigDict(frozen=True)

    name: str
    keywords: frozenset[str] = frozenset()
    quote_chars: str = "\"'"
    declaration_keywords: frozenset[str] = frozenset()
    constant_keywords: frozenset[str] = frozenset()
    constructor_keywords: frozenset[str] = frozenset()
    function_keywords: frozenset[str] = frozenset()
    # Single and double quotes delimit the same kind of literal.
    interchangeable_quotes: bool = False


_JS_KEYWORDS = frozenset(
    {
        "async", "await", "break", "case", "catch", "class", "const", "continue", "debugger", "default",
        "delete", "do", "else", "export", "extends", "false", "finally", "for", "function", "if", "import",
        "in", "instanceof", "let", "new", "null", "of", "return", "static", "super", "switch", "this",
        "throw", "true", "try", "typeof", "undefined", "var", "void", "while", "with", "yield",
    }
)  # fmt: skip

_TS_KEYWORDS = _JS_KEYWORDS | frozenset(
    {"abstract", "as", "declare", "enum", "implements", "interface", "namespace", "private", "protected",
     "public", "readonly", "type"}
)  # fmt: skip

_JAVA_KEYWORDS = frozenset(
    {
        "abstract", "boolean", "break", "byte", "case", "catch", "char", "class", "continue", "default",
        "do", "double", "else", "enum", "extends", "false", "final", "finally", "float", "for", "if",
        "implements", "import", "instanceof", "int", "interface", "long", "new", "null", "package",
        "private", "protected", "public", "return", "short", "static", "super", "switch", "this", "throw",
        "throws", "true", "try", "var", "void", "while",
    }
)  # fmt: skip

_CSHARP_KEYWORDS = _JAVA_KEYWORDS - {"final", "throws", "package", "implements", "extends", "boolean"} | frozenset(
    {"bool", "const", "namespace", "readonly", "string", "struct", "using"}
)

_C_KEYWORDS = frozenset(
    {
        "auto", "break", "case", "char", "const", "continue", "default", "do", "double", "else", "enum",
        "extern", "float", "for", "goto", "if", "int", "long", "register", "return", "short", "signed",
        "sizeof", "static", "struct", "switch", "typedef", "union", "unsigned", "void", "volatile", "while",
    }
)  # fmt: skip

_CPP_KEYWORDS = _C_KEYWORDS | frozenset(
    {"auto", "bool", "catch", "class", "constexpr", "delete", "false", "namespace", "new", "nullptr",
     "private", "protected", "public", "template", "this", "throw", "true", "try", "typename", "using",
     "virtual"}
)  # fmt: skip

_GO_KEYWORDS = frozenset(
    {
        "break", "case", "chan", "const", "continue", "default", "defer", "else", "fallthrough", "false",
        "for", "func", "go", "goto", "if", "import", "interface", "map", "nil", "package", "range",
        "return", "select", "struct", "switch", "true", "type", "var",
    }
)  # fmt: skip

_RUST_KEYWORDS = frozenset(
    {
        "as", "async", "await", "break", "const", "continue", "crate", "else", "enum", "false", "fn",
        "for", "if", "impl", "in", "let", "loop", "match", "mod", "move", "mut", "pub", "ref", "return",
        "self", "static", "struct", "super", "trait", "true", "type", "unsafe", "use", "where", "while",
    }
)  # fmt: skip

_PROFILES: dict[str, LanguageProfile] = {
    "javascript": LanguageProfile(
        name="javascript",
        keywords=_JS_KEYWORDS,
        quote_chars="\"'`",
        declaration_keywords=frozenset({"var", "let", "const"}),
        constant_keywords=frozenset({"const"}),
        constructor_keywords=frozenset({"class"}),
        function_keywords=frozenset({"function"}),
        interchangeable_quotes=True,
    ),
    "typescript": LanguageProfile(
        name="typescript",
        keywords=_TS_KEYWORDS,
        quote_chars="\"'`",
        declaration_keywords=frozenset({"var", "let", "const"}),
        constant_keywords=frozenset({"const"}),
        constructor_keywords=frozenset({"class", "interface", "enum", "type"}),
        function_keywords=frozenset({"function"}),
        interchangeable_quotes=True,
    ),
    "java": LanguageProfile(
        name="java",
        keywords=_JAVA_KEYWORDS,
        declaration_keywords=frozenset({"var"}),
        constructor_keywords=frozenset({"class", "interface", "enum"}),
    ),
    "csharp": LanguageProfile(
        name="csharp",
        keywords=_CSHARP_KEYWORDS,
        declaration_keywords=frozenset({"var", "const"}),
        constant_keywords=frozenset({"const"}),
        constructor_keywords=frozenset({"class", "interface", "enum", "struct"}),
    ),
    "c": LanguageProfile(
        name="c",
        keywords=_C_KEYWORDS,
        constructor_keywords=frozenset({"struct", "enum", "union"}),
    ),
    "cpp": LanguageProfile(
        name="cpp",
        keywords=_CPP_KEYWORDS,
        constructor_keywords=frozenset({"class", "struct", "enum", "union"}),
    ),
    "go": LanguageProfile(
        name="go",
        keywords=_GO_KEYWORDS,
        quote_chars="\"'`",
        declaration_keywords=frozenset({"var", "const"}),
        constant_keywords=frozenset({"const"}),
        function_keywords=frozenset({"func"}),
    ),
    "rust": LanguageProfile(
        name="rust",
        keywords=_RUST_KEYWORDS,
        quote_chars='"',
        declaration_keywords=frozenset({"let", "const", "static"}),
        constant_keywords=frozenset({"const", "static"}),
        constructor_keywords=frozenset({"struct", "enum", "trait"}),
        function_keywords=frozenset({"fn"}),
    ),
    GENERIC_LANGUAGE: LanguageProfile(name=GENERIC_LANGUAGE, interchangeable_quotes=True),
}

_LANGUAGE_ALIASES = {
    "c#": "csharp",
    "cs": "csharp",
    "c++": "cpp",
    "cxx": "cpp",
    "golang": "go",
    "js": "javascript",
    "node": "javascript",
    "rs": "rust",
    "ts": "typescript",
}

_EXTENSION_LANGUAGE_MAP = {
    ".c": "c",
    ".cc": "cpp",
    ".cjs": "javascript",
    ".cpp": "cpp",
    ".cs": "csharp",
    ".cxx": "cpp",
    ".go": "go",
    ".h": "c",
    ".hh": "cpp",
    ".hpp": "cpp",
    ".java": "java",
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".rs": "rust",
    ".ts": "typescript",
    ".tsx": "typescript",
}

SUPPORTED_LANGUAGES = frozenset(_PROFILES)


def normalize_language(language: str) -> str:
    normalized = language.strip().lower()
    resolved = _LANGUAGE_ALIASES.get(normalized, normalized)
    if resolved not in SUPPORTED_LANGUAGES:
        raise ValueError(f"Unsupported language '{language}'. Supported: {sorted(SUPPORTED_LANGUAGES)}")
    return resolved


def detect_language_from_path(file_path: Path) -> str:
    return _EXTENSION_LANGUAGE_MAP.get(file_path.suffix.lower(), GENERIC_LANGUAGE)


def resolve_language(language: str | None, file_path: Path | None) -> str:
    if language:
        return normalize_language(language)
    if file_path:
        return detect_language_from_path(file_path)
    return DEFAULT_LANGUAGE


def get_profile(language: str) -> LanguageProfile:
    return _PROFILES[normalize_language(language)]
