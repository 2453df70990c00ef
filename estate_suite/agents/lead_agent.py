"""
Lead Agent
Filters and summarizes CRM leads.
"""

from typing import Optional, Sequence, Union

from .base import BaseAgent
from estate_suite.schemas.lead import Lead, LeadCategory
from estate_suite.schemas.results import LeadSummary
from estate_suite.domain.leads import LeadClassifier


class LeadInput:
    """Lead Agent input"""
    def __init__(
        self,
        leads: Sequence[Lead],
        category: Union[LeadCategory, str] = LeadCategory.ALL,
        search_term: str = "",
    ):
        self.leads = leads
        self.category = category
        self.search_term = search_term


class LeadView:
    """Lead Agent output: the filtered list plus the summary of all leads"""
    def __init__(self, leads: list[Lead], summary: LeadSummary):
        self.leads = leads
        self.summary = summary


class LeadAgent(BaseAgent[LeadInput, LeadView]):
    """
    Lead Agent

    The summary always covers the whole collection, as the dashboard
    counters do; the filter only narrows the listed leads.
    """

    name = "LeadAgent"

    def __init__(self, classifier: Optional[LeadClassifier] = None):
        super().__init__()
        self.classifier = classifier or LeadClassifier()

    def _process(self, input_data: LeadInput) -> LeadView:
        """Run filter and summary"""
        leads = list(input_data.leads)
        filtered = self.classifier.filter(
            leads,
            category=input_data.category,
            search_term=input_data.search_term,
        )
        return LeadView(leads=filtered, summary=self.classifier.summarize(leads))
