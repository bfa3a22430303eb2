"""
Natural-language search over an introspected GraphQL schema.

Terms are pulled out of free text, matched as case-insensitive substrings
against type and field names/descriptions, and the matches are paginated and
rendered as plain text for an AI assistant to read.
"""
import logging
import math

from schemas.introspection import (
    FieldSummary,
    IntrospectedType,
    MatchedType,
    Page,
    SchemaDocument,
)

logger = logging.getLogger(__name__)

MAX_TYPES_PER_PAGE = 5
MAX_FIELDS_PER_TYPE = 10

# Question words and schema vocabulary that say nothing about *which* data is wanted
STOPWORDS = frozenset({
    "what", "are", "available", "about", "show", "me", "the", "data", "for",
    "fields", "types", "queries", "query", "schema", "information",
})

# Stripped from token edges; underscores stay so names like __typename survive
SENTENCE_PUNCTUATION = "?!.,;:\"'()[]{}"

NO_DESCRIPTION = "No description available"


def extract_key_terms(query: str) -> list[str]:
    """
    Extract significant search terms from a natural-language query.

    Tokens are lower-cased and split on whitespace; surrounding punctuation is
    stripped, then stopwords and tokens of two characters or fewer are dropped.
    Order and duplicates are preserved.

    Example:
        "What DNS analytics fields are available?" -> ["dns", "analytics"]
    """
    terms = []
    for token in query.lower().split():
        word = token.strip(SENTENCE_PUNCTUATION)
        if word in STOPWORDS or len(word) <= 2:
            continue
        terms.append(word)
    return terms


def _contains(text: str | None, term: str) -> bool:
    return text is not None and term in text.lower()


def _type_matches(schema_type: IntrospectedType, terms: list[str]) -> bool:
    for term in terms:
        if _contains(schema_type.name, term) or _contains(schema_type.description, term):
            return True
        for field in schema_type.fields or []:
            if _contains(field.name, term) or _contains(field.description, term):
                return True
    return False


def find_relevant_types(schema: SchemaDocument, terms: list[str]) -> list[MatchedType]:
    """
    Return the schema types that any term matches, in schema order.

    A type matches if a term is a case-insensitive substring of its name, its
    description, or the name or description of any of its fields.

    Raises:
        ValueError: If `terms` is empty.
    """
    if not terms:
        raise ValueError("At least one search term is required")

    lowered = [term.lower() for term in terms]
    matches = []
    for schema_type in schema.types:
        if not _type_matches(schema_type, lowered):
            continue
        fields = None
        if schema_type.fields is not None:
            fields = [
                FieldSummary(name=f.name, description=f.description, type=f.type_name)
                for f in schema_type.fields
            ]
        matches.append(
            MatchedType(name=schema_type.name, description=schema_type.description, fields=fields),
        )

    logger.debug("Matched %d of %d types for terms %s", len(matches), len(schema.types), terms)
    return matches


def format_type_info(matched_type: MatchedType, show_all_fields: bool = False) -> str:
    """
    Render a matched type as text.

    Only the first MAX_FIELDS_PER_TYPE fields are listed unless
    `show_all_fields` is set. When fields are cut, a trailing line reports how
    many were left out. The underlying MatchedType is never modified.
    """
    fields = matched_type.fields or []
    displayed = fields if show_all_fields else fields[:MAX_FIELDS_PER_TYPE]

    lines = [f"Type: {matched_type.name}"]
    if matched_type.description:
        lines.append(f"Description: {matched_type.description}")
    lines.append("Fields:")
    # The field list always follows "Fields:\n", even when it is empty
    result = "\n".join(lines) + "\n" + "\n".join(
        f"- {field.name} ({field.type or 'unknown'}): {field.description or NO_DESCRIPTION}"
        for field in displayed
    )

    hidden = len(fields) - len(displayed)
    if hidden > 0:
        result += f"\n... and {hidden} more fields"
    return result


def paginate(matches: list[MatchedType], page: int = 1) -> Page:
    """
    Slice matches into a fixed-size page.

    A page past the end yields an empty slice rather than an error.

    Raises:
        ValueError: If `page` is less than 1.
    """
    if page < 1:
        raise ValueError(f"Page must be a positive integer, got {page}")

    start = (page - 1) * MAX_TYPES_PER_PAGE
    end = start + MAX_TYPES_PER_PAGE
    return Page(
        items=matches[start:end],
        page=page,
        total_pages=math.ceil(len(matches) / MAX_TYPES_PER_PAGE),
        total=len(matches),
    )


def build_search_response(terms: list[str], matches: list[MatchedType], page: int = 1) -> str:
    """Compose the text returned by the schema exploration tool for one page."""
    result = paginate(matches, page)
    term_text = " ".join(terms)

    response = f'Found {result.total} types related to "{term_text}"\n'
    response += f"Showing page {result.page} of {result.total_pages}\n\n"
    response += "\n\n".join(format_type_info(t) for t in result.items)

    if result.has_next:
        response += f"\n\nUse page={result.page + 1} to see more results"
    return response
