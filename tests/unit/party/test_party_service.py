"""Tests for the party service write paths."""

import pytest

from sogrinha.core.modules.party.models import Address, PartyData, PartyUpdate
from sogrinha.errors import NotFoundError


def jose() -> PartyData:
    return PartyData(full_name="José da Silva", cpf="123.456.789-00", address=Address(cep="01002-000"))


class TestPartyService:
    """Tests for PartyService create and update against an in-memory collection."""

    @pytest.mark.asyncio
    async def test_create_stores_search_fields(self, services, database):
        """Test that creating a party stores its normalized search fields."""
        owner = await services.owner.create_party(jose())

        stored = database.collections["owners"].docs[owner.id]
        assert stored["search"]["full_name"] == "josedasilva"
        assert stored["search"]["cpf"] == "12345678900"
        assert stored["search"]["cep"] == "01002000"
        assert owner.search.full_name == "josedasilva"

    @pytest.mark.asyncio
    async def test_partial_update_recomputes_search(self, services, database):
        """Test that renaming a party refreshes the name search field and keeps the others."""
        owner = await services.owner.create_party(jose())

        updated = await services.owner.update_party(owner.id, PartyUpdate(full_name="João Araújo"))

        stored = database.collections["owners"].docs[owner.id]
        assert stored["full_name"] == "João Araújo"
        assert stored["search"]["full_name"] == "joaoaraujo"
        assert stored["search"]["cpf"] == "12345678900"
        assert updated.search.full_name == "joaoaraujo"
        assert updated.cpf == "123.456.789-00"

    @pytest.mark.asyncio
    async def test_address_update_recomputes_cep(self, services, database):
        """Test that a new address refreshes the CEP search field."""
        lessee = await services.lessee.create_party(jose())

        await services.lessee.update_party(lessee.id, PartyUpdate(address=Address(cep="24000-000")))

        assert database.collections["lessees"].docs[lessee.id]["search"]["cep"] == "24000000"

    @pytest.mark.asyncio
    async def test_update_missing_party(self, services, mock_owner):
        """Test that updating an unknown party raises NotFoundError."""
        with pytest.raises(NotFoundError):
            await services.owner.update_party(mock_owner.id, PartyUpdate(full_name="X"))
