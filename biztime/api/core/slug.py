import re


def slugify(text: str) -> str:
    """'Barnes & Noble' -> 'barnes-and-noble'"""
    slug = text.lower().replace("&", " and ")
    slug = re.sub(r"\s+", "-", slug.strip())
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    return re.sub(r"-{2,}", "-", slug).strip("-")
