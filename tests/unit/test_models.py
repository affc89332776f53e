"""Pydantic model unit tests.

Tests the catalog, the Essentials plan rule, camelCase wire format
and the saved-proposal age reference.
"""

import pytest
from pydantic import ValidationError

from proposal_studio.models import (
    FEATURE_CATALOG,
    FEATURE_CATEGORIES,
    ONBOARDING_PACKAGES,
    FirmData,
    PlanType,
    SavedProposal,
    get_onboarding_package,
)


class TestCatalog:
    def test_onboarding_packages_in_order(self):
        assert [p.id for p in ONBOARDING_PACKAGES] == ["group", "guided", "enhanced", "premium"]
        assert ONBOARDING_PACKAGES[0].price == 0
        assert ONBOARDING_PACKAGES[0].price_display == "Free"

    def test_lookup(self):
        assert get_onboarding_package("premium").price_display == "$3,499"
        assert get_onboarding_package("platinum") is None

    def test_packages_are_frozen(self):
        with pytest.raises(ValidationError):
            ONBOARDING_PACKAGES[1].price = 1

    def test_feature_catalog_is_union_of_categories(self):
        total = sum(len(features) for features in FEATURE_CATEGORIES.values())
        assert len(FEATURE_CATALOG) == total
        assert "Client Portal" in FEATURE_CATALOG


class TestEssentialsRule:
    @pytest.mark.parametrize("firm_size", [2, 3, 10, 250])
    def test_multi_user_firm_switched_to_pro(self, firm_size):
        firm = FirmData(
            firm_name="Acme",
            contact_name="Jane",
            firm_size=firm_size,
            selected_plan=PlanType.ESSENTIALS,
        )
        assert firm.selected_plan == PlanType.PRO

    def test_solo_firm_keeps_essentials(self):
        firm = FirmData(
            firm_name="Solo CPA",
            contact_name="Sam",
            firm_size=1,
            selected_plan=PlanType.ESSENTIALS,
        )
        assert firm.selected_plan == PlanType.ESSENTIALS

    def test_business_not_touched(self):
        firm = FirmData(firm_name="Big", contact_name="Bo", firm_size=40, selected_plan=PlanType.BUSINESS)
        assert firm.selected_plan == PlanType.BUSINESS

    def test_firm_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            FirmData(firm_name="Acme", contact_name="Jane", firm_size=0)


class TestWireFormat:
    def test_firm_data_camel_case(self, sample_firm):
        wire = sample_firm.to_wire()
        assert wire["firmName"] == "Acme"
        assert wire["selectedPlan"] == "TaxDome Pro"
        assert wire["selectedOnboarding"]["priceDisplay"] == "$999"
        assert "firm_name" not in wire

    def test_accepts_both_spellings(self):
        by_alias = FirmData.model_validate({"firmName": "A", "contactName": "B", "firmSize": 2})
        by_name = FirmData(firm_name="A", contact_name="B", firm_size=2)
        assert by_alias == by_name

    def test_saved_proposal_round_trip(self, make_proposal):
        proposal = make_proposal(created_at=1_000, last_modified=2_000)
        wire = proposal.to_wire()
        assert wire["createdAt"] == 1_000
        assert wire["lastModified"] == 2_000
        assert SavedProposal.model_validate(wire) == proposal


class TestAgeReference:
    def test_uses_created_at(self, make_proposal):
        assert make_proposal(created_at=100, last_modified=900).age_reference == 100

    def test_legacy_falls_back_to_last_modified(self, make_proposal):
        assert make_proposal(created_at=None, last_modified=900).age_reference == 900

    def test_legacy_record_without_created_at_loads(self, make_proposal):
        wire = make_proposal(last_modified=5).to_wire()
        del wire["createdAt"]
        assert SavedProposal.model_validate(wire).created_at is None
