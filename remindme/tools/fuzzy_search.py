"""
REMINDME Fuzzy Search

Approximate text matching used by description search.

Scoring is delegated to fuzzywuzzy's partial_ratio, so a query that
appears anywhere in a text (ignoring case and punctuation) scores 100.
"""

import logging
from typing import List, Optional, Sequence

from fuzzywuzzy import fuzz, process, utils

from remindme import config

logger = logging.getLogger(__name__)


class FuzzySearcher:
    """
    Returns the corpus entries that approximately match a query.

    Any object with the same match() signature can stand in for this
    class in ReminderCollection.
    """

    def __init__(self, threshold: Optional[int] = None):
        """
        Args:
            threshold: Minimum partial_ratio score, 0-100
                       (default: REMINDME_FUZZY_THRESHOLD)
        """
        if threshold is None:
            threshold = config.FUZZY_THRESHOLD
        if not 0 <= threshold <= 100:
            raise ValueError(f"threshold must be between 0 and 100, got {threshold}")
        self.threshold = threshold

    def match(self, corpus: Sequence[str], query: str) -> List[str]:
        """
        Match query against every text in corpus.

        An empty query matches everything; a query with no letters or
        digits matches nothing.

        Args:
            corpus: Texts to search
            query: Text to look for

        Returns:
            Matching texts, in corpus order
        """
        if not corpus:
            return []
        if not query:
            return list(corpus)
        # Symbol-only queries carry nothing to score against
        if not utils.full_process(query):
            logger.debug(f"Fuzzy match {query!r}: no alphanumeric text to match")
            return []

        scored = process.extractBests(
            query,
            list(corpus),
            scorer=fuzz.partial_ratio,
            score_cutoff=self.threshold,
            limit=None
        )
        matched = {text for text, _score in scored}

        results = [text for text in corpus if text in matched]
        logger.debug(f"Fuzzy match {query!r}: {len(results)}/{len(corpus)} texts")
        return results


def fuzzy_match(corpus: Sequence[str], query: str, threshold: Optional[int] = None) -> List[str]:
    """Convenience wrapper: FuzzySearcher(threshold).match(corpus, query)"""
    return FuzzySearcher(threshold).match(corpus, query)
