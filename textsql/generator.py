"""Natural language -> SQL text via the generative-language service.

The service's answer is returned as opaque text. Nothing here parses or
validates it.
"""

import logging

from textsql import llm
from textsql.config import settings
from textsql.prompts import build_generation_prompt

log = logging.getLogger(__name__)

GENERATION_FAILED_MESSAGE = "Failed to generate SQL query. Please try again later."


class GenerationFailure(Exception):
    """The only error the generator surfaces. The underlying cause is logged, not kept."""

    def __init__(self, message: str = GENERATION_FAILED_MESSAGE):
        super().__init__(message)
        self.message = message


_OFFLINE_RECENT_USERS = """\
SELECT * FROM users
WHERE created_at >= DATE_SUB(CURRENT_DATE(), INTERVAL 30 DAY)
ORDER BY created_at DESC;"""

_OFFLINE_TOP_PRODUCTS = """\
SELECT p.product_id, p.name, SUM(o.quantity * o.price) as total_sales
FROM products p
JOIN order_items o ON p.product_id = o.product_id
GROUP BY p.product_id, p.name
ORDER BY total_sales DESC
LIMIT 5;"""

_OFFLINE_HIGH_SPENDERS = """\
SELECT c.customer_id, c.name, c.email, SUM(o.total_amount) as total_spent
FROM customers c
JOIN orders o ON c.customer_id = o.customer_id
GROUP BY c.customer_id, c.name, c.email
HAVING total_spent > 1000
ORDER BY total_spent DESC;"""

_OFFLINE_DEFAULT = """\
SELECT * FROM users
WHERE active = true
ORDER BY created_at DESC
LIMIT 10;"""


def offline_sql(text: str) -> str:
    """Canned SQL used when no API key is configured."""
    lower = text.lower()
    if "last 30 days" in lower or "last month" in lower:
        return _OFFLINE_RECENT_USERS
    if "top 5" in lower and "product" in lower:
        return _OFFLINE_TOP_PRODUCTS
    if "spent more than" in lower or "$1000" in lower:
        return _OFFLINE_HIGH_SPENDERS
    return _OFFLINE_DEFAULT


async def generate_query(prompt_text: str) -> str:
    """Return the service's SQL for `prompt_text`, stripped of surrounding whitespace.

    One round trip, no retries. Any failure becomes a GenerationFailure.
    """
    log.info("Generating SQL from text: %s", prompt_text)

    if not settings.genai.configured:
        log.warning("No generative-language API key configured, returning offline SQL")
        return offline_sql(prompt_text)

    try:
        raw = await llm.complete(build_generation_prompt(prompt_text))
    except Exception:
        log.exception("Error generating SQL")
        raise GenerationFailure() from None
    return raw.strip()
