"""
Lead Classifier
Filters and aggregates pre-scored CRM leads.
"""

from typing import Iterable, Union
from loguru import logger

from estate_suite.schemas.lead import Lead, LeadCategory, LeadScore
from estate_suite.schemas.results import LeadSummary
from .errors import InvalidInputError
from .numeric import round_half_up


class LeadClassifier:
    """
    Lead list filtering and summary

    Score and probability are assigned upstream; this engine only
    selects and aggregates.
    """

    def filter(
        self,
        leads: Iterable[Lead],
        category: Union[LeadCategory, str] = LeadCategory.ALL,
        search_term: str = "",
    ) -> list[Lead]:
        """
        Selects leads by category and search term.

        Args:
            leads: lead collection
            category: All, Hot, Warm or Cold (case-insensitive)
            search_term: case-insensitive substring of name or email

        Returns:
            list[Lead]: matching leads in input order
        """
        category = self._category(category)
        term = (search_term or "").lower()

        matched = [
            lead for lead in leads
            if self._matches_category(lead, category) and self._matches_search(lead, term)
        ]

        logger.debug(f"Lead filter category={category.value} term={term!r}: {len(matched)} matched")
        return matched

    def summarize(self, leads: Iterable[Lead]) -> LeadSummary:
        """
        Aggregates a lead collection.

        An empty collection yields all-zero counts and an average
        probability of 0.
        """
        leads = list(leads)

        counts = {score.value: 0 for score in LeadScore}
        top_lead = None
        for lead in leads:
            counts[lead.score] = counts.get(lead.score, 0) + 1
            if top_lead is None or lead.probability > top_lead.probability:
                top_lead = lead

        if leads:
            average = round_half_up(sum(lead.probability for lead in leads) / len(leads))
        else:
            average = 0

        summary = LeadSummary(
            total=len(leads),
            hot_count=counts[LeadScore.HOT.value],
            warm_count=counts[LeadScore.WARM.value],
            cold_count=counts[LeadScore.COLD.value],
            average_probability=average,
            top_lead=top_lead,
        )

        logger.info(
            f"Lead summary: {summary.total} total, {summary.hot_count} hot, "
            f"avg probability {summary.average_probability}%"
        )
        return summary

    @staticmethod
    def _category(category: Union[LeadCategory, str]) -> LeadCategory:
        try:
            return LeadCategory(category)
        except ValueError:
            raise InvalidInputError(
                "category", f"expected one of All, Hot, Warm, Cold; got {category!r}"
            ) from None

    @staticmethod
    def _matches_category(lead: Lead, category: LeadCategory) -> bool:
        return category == LeadCategory.ALL or lead.score == category.value

    @staticmethod
    def _matches_search(lead: Lead, term: str) -> bool:
        if not term:
            return True
        return term in lead.name.lower() or term in lead.email.lower()
