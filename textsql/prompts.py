_INSTRUCTIONS = """\
Convert the following natural language query to SQL.
Only return the SQL query without any explanations or markdown formatting.
"""


def build_generation_prompt(text: str) -> str:
    # The user's text goes in as-is: no escaping, no truncation.
    return f'{_INSTRUCTIONS}\nNatural language query: "{text}"\n'
