"""Query dispatcher — exact code lookup first, ranked free text otherwise."""

from cercaclasse.config import settings
from cercaclasse.log import logger, sanitize_for_log
from cercaclasse.matching import compact_code, looks_like_code, rank
from cercaclasse.schema import ResultView, SearchMode, SearchResponse
from cercaclasse.store import RecordStore, get_store


def search(query: str | None, store: RecordStore | None = None) -> SearchResponse:
    """Look up class records for a query.

    A query shaped like a mechanographic code is matched exactly against
    school codes, then institution codes; if neither hits, or the query is
    free text, records are ranked by token score.

    Args:
        query: Raw query text.
        store: Record store to search. None = the process-wide store.

    Returns:
        SearchResponse with the result views and the mode that produced them.

    Raises:
        StoreLoadError: If the records cannot be loaded.
    """
    q = (query or "").strip()
    if not q:
        return SearchResponse(mode=SearchMode.EMPTY)

    records = (store or get_store()).load()
    logger.debug(f"Search {sanitize_for_log(q)!r} over {len(records)} records")

    if looks_like_code(q):
        code = compact_code(q)

        by_school = [r for r in records if r.school_code.upper() == code]
        if by_school:
            return SearchResponse(
                mode=SearchMode.BY_SCHOOL_CODE,
                results=[ResultView.from_record(r) for r in by_school[:settings.code_result_limit]],
            )

        by_institution = [r for r in records if r.institution_code.upper() == code]
        if by_institution:
            return SearchResponse(
                mode=SearchMode.BY_INSTITUTION_CODE,
                results=[ResultView.from_record(r) for r in by_institution[:settings.code_result_limit]],
            )

        logger.debug(f"No exact code match for {code}, falling back to ranking")

    ranked = rank(q, records, settings.ranked_result_limit)
    return SearchResponse(
        mode=SearchMode.RANKED,
        results=[ResultView.from_record(r, score=s) for r, s in ranked],
    )
