"""Detection of good practices in the whole source text."""

FALLBACK_ASPECT = "The code is structured in a readable manner"


def find_positive_aspects(code: str, language: str) -> list[str]:
    """List positive aspects of ``code``; never empty.

    Checks are plain substring tests over the whole text. ``language`` is compared
    exactly (no case folding).
    """
    aspects: list[str] = []

    if "eval(" not in code and "innerHTML =" not in code:
        aspects.append("No obvious critical security vulnerabilities detected")

    if language in ("javascript", "typescript"):
        # "===" contains "==", so this can only hold for text with neither.
        if "===" in code and "==" not in code:
            aspects.append("Uses strict equality operators consistently")
        if "const " in code and "var " not in code:
            aspects.append("Uses modern variable declarations (const/let) instead of var")
        if "try" in code and "catch" in code:
            aspects.append("Implements error handling with try/catch blocks")

    if language == "python":
        if 'if __name__ == "__main__"' in code:
            aspects.append("Uses proper module structure with __name__ == '__main__' check")
        if "def " in code and ":" in code:
            aspects.append("Uses proper function definitions with consistent indentation")

    if not aspects:
        aspects.append(FALLBACK_ASPECT)

    return aspects
