"""Utility for generating Markdown code blocks."""


def md_codeblock(lang: str, code: str) -> str:
    """Generate a fenced Markdown code block."""
    fence = "````" if "```" in code else "```"
    return f"""{fence}{lang}
{code.rstrip()}
{fence}"""
