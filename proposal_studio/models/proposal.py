"""Generated proposal content and saved proposal records."""

from typing import Optional
from pydantic import Field

from proposal_studio.models.common import CamelModel
from proposal_studio.models.firm import FirmData


class ExecutiveSummary(CamelModel):
    """Executive summary block."""
    title: str = Field(..., description="Summary title")
    body: str = Field(..., description="Single-paragraph body (rich text allowed)")
    key_benefits: list[str] = Field(default_factory=list, description="Benefits tied to the client's challenges")


class OnboardingQuote(CamelModel):
    """Onboarding line of the quote."""
    name: str = Field(..., description="Package name")
    price: str = Field(..., description="Formatted price")
    features: list[str] = Field(default_factory=list, description="Key onboarding features")


class Quote(CamelModel):
    """
    Pricing quote block.
    Prices are formatted strings produced by the generator, never numbers.
    """
    plan_name: str = Field(..., description="Plan name")
    price_per_user: str = Field(..., description="Price per user per year")
    billing_frequency: str = Field(..., description="e.g. billed annually")
    software_total: str = Field(..., description="Software subscription subtotal")
    onboarding: OnboardingQuote
    total_annual_cost: str = Field(..., description="Grand total (software + onboarding)")
    features_list: list[str] = Field(default_factory=list, description="Features included in the plan")
    closing_statement: str = Field("", description="Call to action")


class ProposalContent(CamelModel):
    """Structured result of a generation."""
    executive_summary: ExecutiveSummary
    quote: Quote


class SavedProposal(CamelModel):
    """
    Persisted proposal.

    id and created_at are assigned on the first save and never change;
    last_modified is refreshed on every save. Timestamps are epoch milliseconds.
    Legacy records may lack created_at.
    """
    id: Optional[str] = Field(None, description="Stable proposal id")
    created_at: Optional[int] = Field(None, description="First save (epoch ms)")
    last_modified: int = Field(0, description="Last save (epoch ms)")
    firm_data: FirmData
    content: ProposalContent

    @property
    def age_reference(self) -> int:
        """Timestamp the retention window is measured from."""
        return self.created_at if self.created_at is not None else self.last_modified
