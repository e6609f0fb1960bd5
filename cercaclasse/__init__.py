"""
cercaclasse — in-memory lookup of Italian school classes.

Loads the class open-data CSV once and answers free-text or
mechanographic-code queries.

Usage:
    from cercaclasse import search

    # Free text: ranked by token score
    response = search("einstein potenza")

    # Codice meccanografico: exact school/institution match
    response = search("PZIS022008")
    response.to_dict()  # {"results": [...], "mode": "BY_SCHOOL_CODE"}
"""

from cercaclasse.search import search
from cercaclasse.store import RecordStore, clear_cache, load_records

__all__ = ["search", "RecordStore", "load_records", "clear_cache"]
