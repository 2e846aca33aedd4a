"""Term explanation handler.

Handles:
- explain_term: Definition plus cited usage examples from the corpus
"""

from ...models import ExplainTermParams, ExplainTermResult, TermExample, ToolResult
from .base import HandlerContext, citation_info, count_tokens
from .glossary import lookup_definition

# Search hits turned into examples, for known and unknown terms
KNOWN_TERM_EXAMPLES = 3
UNKNOWN_TERM_EXAMPLES = 5


async def handle_explain_term(
    params: ExplainTermParams,
    ctx: HandlerContext,
) -> ToolResult:
    """Explain a YAML keyword, block or object class.

    Every example is backed by a citation re-derived from the index. A term
    with no glossary entry and no hits is reported as unconfirmed rather
    than guessed at.
    """
    term = params.term.lower()
    definition = lookup_definition(term)
    limit = KNOWN_TERM_EXAMPLES if definition else UNKNOWN_TERM_EXAMPLES
    results = ctx.index.search(term, max_results=limit)

    if definition is None and not results:
        explanation = (
            f'UNKNOWN / NOT CONFIRMED IN SOURCES: The term "{params.term}" was not found in '
            "the indexed documentation and examples. It may be a typo, an advanced feature, "
            "or a term not covered in the available sources."
        )
        data = ExplainTermResult(term=params.term, explanation=explanation, confirmed=False)
        return ToolResult(
            data=data.model_dump(mode="json"),
            input_tokens=count_tokens(params.term),
            output_tokens=count_tokens(explanation),
        )

    if definition is None:
        explanation = (
            f'The term "{params.term}" appears in {len(results)} indexed passages. '
            "See the cited examples for how it is used."
        )
        reason = f'Usage of "{params.term}"'
    else:
        explanation = definition
        reason = f'Example of "{params.term}"'

    citations = []
    examples = []
    for result in results:
        citation = ctx.index.create_citation(
            result.relative_path, result.line_start, result.line_end, reason
        )
        if citation is None:
            continue
        info = citation_info(citation)
        citations.append(info)
        examples.append(TermExample(snippet=citation.excerpt, citations=[info]))

    data = ExplainTermResult(
        term=params.term,
        explanation=explanation,
        confirmed=bool(citations),
        citations=citations,
        examples=examples,
    ).model_dump(mode="json")
    return ToolResult(
        data=data,
        input_tokens=count_tokens(params.term),
        output_tokens=count_tokens(explanation) + sum(count_tokens(e.snippet) for e in examples),
    )
