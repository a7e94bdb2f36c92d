"""
Shared pieces of the compiled provider instructions
"""

from typing import NamedTuple


DEFAULT_DISPLAY_LANGUAGE = "Traditional Chinese (zh-TW)"

OUTPUT_RULES = (
    "Output format:\n"
    "Return exactly one JSON object wrapped in a ```json ... ``` fenced code block.\n"
    "Keys must be exactly the English names shown below; write every value in {language}."
)


class CompiledQuery(NamedTuple):
    """Instruction sent to the provider and the schema description it embeds"""
    instruction: str
    schema_hint: str


def join_instruction(body: str, schema_hint: str) -> CompiledQuery:
    """Append the schema hint to the instruction body"""
    return CompiledQuery(
        instruction=f"{body.strip()}\n\n{schema_hint}",
        schema_hint=schema_hint
    )
