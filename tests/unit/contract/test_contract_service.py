"""Tests for the contract service write paths."""

from datetime import UTC, date, datetime

import pytest

from sogrinha.core.modules.contract.models import ContractData, ContractKind, ContractUpdate
from sogrinha.core.modules.party.models import Address, PartyData
from sogrinha.core.modules.real_estate.models import RealEstateData, RealEstateKind


class TestContractService:
    """Tests for name and address denormalization on contract writes."""

    @pytest.mark.asyncio
    async def test_create_copies_names_and_address(self, services, database):
        """Test that a new contract carries party names and the property address."""
        owner = await services.owner.create_party(PartyData(full_name="José da Silva"))
        lessee = await services.lessee.create_party(PartyData(full_name="Maria Souza"))
        real_estate = await services.real_estate.create_real_estate(
            RealEstateData(
                address=Address(street="Rua Direita", number="100", neighborhood="Centro", city="São Paulo", state="SP"),
                kind=RealEstateKind.APARTMENT,
                owner_id=owner.id,
            )
        )

        contract = await services.contract.create_contract(
            ContractData(
                kind=ContractKind.RENTAL,
                start_date=datetime(2026, 10, 1, tzinfo=UTC),
                end_date=datetime(2027, 9, 30, tzinfo=UTC),
                payment_day=5,
                payment_value=2500,
                owner_id=owner.id,
                lessee_id=lessee.id,
                real_estate_id=real_estate.id,
            ),
            today=date(2026, 10, 19),
        )

        stored = database.collections["contracts"].docs[contract.id]
        assert stored["owner_name"] == "José da Silva"
        assert stored["lessee_name"] == "Maria Souza"
        assert stored["real_estate_address"] == "Rua Direita, 100 - Centro, São Paulo/SP"
        assert contract.identifier.startswith("#ALG19102026")

    @pytest.mark.asyncio
    async def test_update_without_lessee_clears_name(self, services, database):
        """Test that detaching the lessee clears its denormalized name."""
        owner = await services.owner.create_party(PartyData(full_name="José da Silva"))
        lessee = await services.lessee.create_party(PartyData(full_name="Maria Souza"))
        contract = await services.contract.create_contract(
            ContractData(
                kind=ContractKind.SALE_WITH_EXCLUSIVITY,
                start_date=datetime(2026, 10, 1, tzinfo=UTC),
                end_date=datetime(2026, 12, 1, tzinfo=UTC),
                payment_day=1,
                payment_value=500000,
                owner_id=owner.id,
                lessee_id=lessee.id,
            )
        )

        await services.contract.update_contract(contract.id, ContractUpdate.model_validate({"lessee_id": None}))

        stored = database.collections["contracts"].docs[contract.id]
        assert stored["lessee_name"] is None
        assert stored["real_estate_address"] is None
