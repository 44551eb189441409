# health_faq.py -- canned answers for general health questions
from .knowledge import get_health_responses


def find_best_match(query: str) -> dict:
    """First response whose keyword appears in the question, else generic wellness tips."""
    data = get_health_responses()
    q = (query or "").lower()
    for row in data["responses"]:
        if row["keyword"] in q:
            return {"answer": row["answer"], "tips": list(row["tips"])}
    default = data["default"]
    return {"answer": default["answer"], "tips": list(default["tips"])}
