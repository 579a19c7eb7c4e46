"""Qualification result schema for the RobCo screening rubric."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Verdict = Literal["qualify", "review", "disqualify"]


class Metrics(BaseModel):
    """Quantitative facts about the company. Unknown values are null."""

    model_config = ConfigDict(extra="forbid")

    revenue_usd: Optional[float] = Field(description="Annual revenue in USD")
    recurring_revenue_pct: Optional[float] = Field(
        description="Share of revenue that is recurring, 0-100"
    )
    headcount: Optional[int] = Field(description="Full-time employees")
    founded_year: Optional[int] = Field(description="Year the company was founded")
    funding_total_usd: Optional[float] = Field(description="Total external funding in USD")
    funding_to_revenue_ratio: Optional[float] = Field(
        description="Total funding divided by annual revenue"
    )
    debt_to_revenue_ratio: Optional[float] = Field(
        description="Debt divided by annual revenue"
    )


class Attributes(BaseModel):
    """Qualitative characteristics of the company. Unknown values are null."""

    model_config = ConfigDict(extra="forbid")

    geography: Optional[str] = Field(description="Headquarters country or region")
    english_operations: Optional[bool] = Field(description="Operates in English")
    vms: Optional[bool] = Field(description="Vertical market software vendor")
    b2b: Optional[bool] = Field(description="Sells to businesses")
    software: Optional[bool] = Field(description="Software company")
    owns_ip: Optional[bool] = Field(description="Owns its core intellectual property")
    mission_critical: Optional[bool] = Field(description="Product is mission-critical for customers")
    founder_majority_owned: Optional[bool] = Field(description="Founder(s) own more than 50%")
    private_company: Optional[bool] = Field(description="Privately held")
    broker_involved: Optional[bool] = Field(description="A broker or banker runs the process")
    valuation_not_key: Optional[bool] = Field(description="Valuation is not the primary driver")
    vertical: Optional[str] = Field(description="Industry vertical served")


class CriteriaFlags(BaseModel):
    """Pass/fail per RobCo rule. Null when the evidence does not settle it."""

    model_config = ConfigDict(extra="forbid")

    revenue_over_3m: Optional[bool] = Field(description="Revenue above $3M")
    age_over_15y: Optional[bool] = Field(description="Older than 15 years")
    headcount_over_30: Optional[bool] = Field(description="More than 30 FTE")
    vbu_alignment: Optional[bool] = Field(description="Aligns with a target VBU")
    eu_na_geography: Optional[bool] = Field(description="Based in the EU or North America")
    english_operations: Optional[bool] = Field(description="Operates in English")
    recurring_over_50pct: Optional[bool] = Field(description="More than 50% recurring revenue")
    owns_ip: Optional[bool] = Field(description="Owns its IP")
    buy_and_hold_fit: Optional[bool] = Field(description="Sellers understand buy-and-hold")
    no_broker: Optional[bool] = Field(description="No broker involved")
    valuation_not_key: Optional[bool] = Field(description="Valuation is not the key driver")
    founder_over_50pct: Optional[bool] = Field(description="Founder owns more than 50%")
    leverage_under_1x: Optional[bool] = Field(description="Debt/investment below 1x revenue")
    auto_filter_disqualify: Optional[bool] = Field(
        description="True when any hard rule clearly fails"
    )


class QualificationResult(BaseModel):
    """Complete screening outcome for one company."""

    model_config = ConfigDict(extra="forbid")

    company_name: str
    website: str
    verdict: Verdict
    reasons: list[str] = Field(description="Short bullets supporting the verdict")
    metrics: Metrics
    attributes: Attributes
    criteria_flags: CriteriaFlags
    notes: str = Field(description="Uncertainties and caveats")
    sources_used: list[str] = Field(description="URLs or evidence keys relied on")
