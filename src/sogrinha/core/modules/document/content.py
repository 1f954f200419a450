"""Fixed legal template for contract documents, filled from the records."""

from datetime import date

from sogrinha.core.modules.contract.models import ContractKind
from sogrinha.core.modules.document.models import ContractContent, ContractDocumentData, ContractSection, Signature
from sogrinha.core.modules.party.models import Party
from sogrinha.core.modules.real_estate.models import RealEstate
from sogrinha.errors import MissingRequiredDataError, ValidationError
from sogrinha.utils import format_currency, format_date, format_date_long

BLANK = "______________________"
FOOTER = "Este documento é parte integrante do sistema de gestão imobiliária."


def describe_party(role: str, party: Party | None) -> str:
    if party is None:
        return f"{role}: {BLANK}."
    return (
        f"{role}: {party.full_name}, {party.marital_status}, portador do RG {party.rg} {party.issuing_body}, "
        f"inscrito no CPF {party.cpf}, residente e domiciliado em {party.address.one_line()}."
    )


def describe_property(seller_role: str, real_estate: RealEstate | None) -> str:
    if real_estate is None:
        location = BLANK
        registration = BLANK
    else:
        location = real_estate.address.one_line()
        registration = real_estate.municipal_registration or BLANK
    return (
        f"O {seller_role} declara ser proprietário e legítimo possuidor do imóvel situado em {location}, "
        f"registrado sob matrícula {registration}."
    )


def build_contract_content(data: ContractDocumentData, today: date) -> ContractContent:
    """Fill the contract template.

    Raises:
        MissingRequiredDataError: If the contract has no owner record
        ValidationError: If the contract kind has no template
    """
    if data.owner is None:
        raise MissingRequiredDataError(f"Contract {data.contract.identifier} has no owner record")

    contract = data.contract
    owner = data.owner

    if contract.kind.is_rental:
        title = "CONTRATO DE LOCAÇÃO DE IMÓVEL"
        seller_role, buyer_role = "LOCADOR", "LOCATÁRIO"
        sections = [
            ContractSection(
                title="1. DAS PARTES",
                paragraphs=[describe_party(seller_role, owner), describe_party(buyer_role, data.lessee)],
            ),
            ContractSection(title="2. DO OBJETO", paragraphs=[describe_property(seller_role, data.real_estate)]),
            ContractSection(
                title="3. DO PRAZO",
                paragraphs=[
                    f"O prazo de locação é de {contract.duration} meses, iniciando em "
                    f"{format_date(contract.start_date)} e terminando em {format_date(contract.end_date)}."
                ],
            ),
            ContractSection(
                title="4. DO VALOR E FORMA DE PAGAMENTO",
                paragraphs=[
                    f"O valor mensal do aluguel é de {format_currency(contract.payment_value)}, "
                    f"a ser pago até o dia {contract.payment_day} de cada mês."
                ],
            ),
        ]
        if contract.kind == ContractKind.RENTAL_WITH_ADMINISTRATION:
            sections.append(
                ContractSection(
                    title="5. DA ADMINISTRAÇÃO",
                    paragraphs=[
                        "A administração do imóvel será realizada pela IMOBILIÁRIA, que ficará responsável pela "
                        "gestão do contrato, recebimento dos aluguéis, e intermediação entre LOCADOR e LOCATÁRIO."
                    ],
                )
            )
    elif contract.kind in (ContractKind.SALE_WITH_EXCLUSIVITY, ContractKind.SALE_WITHOUT_EXCLUSIVITY):
        title = "CONTRATO DE COMPRA E VENDA DE IMÓVEL"
        seller_role, buyer_role = "VENDEDOR", "COMPRADOR"
        sections = [
            ContractSection(
                title="1. DAS PARTES",
                paragraphs=[describe_party(seller_role, owner), describe_party(buyer_role, data.lessee)],
            ),
            ContractSection(title="2. DO OBJETO", paragraphs=[describe_property(seller_role, data.real_estate)]),
            ContractSection(
                title="3. DO VALOR E FORMA DE PAGAMENTO",
                paragraphs=[
                    f"O valor total da venda é de {format_currency(contract.payment_value)}, "
                    "a ser pago conforme condições estabelecidas neste contrato."
                ],
            ),
        ]
    else:
        raise ValidationError(f"Unsupported contract kind: {contract.kind}")

    return ContractContent(
        title=title,
        number=f"Contrato Nº: {contract.identifier}",
        date_line=format_date_long(today),
        sections=sections,
        place_and_date=f"{owner.address.city}, {format_date_long(today)}",
        signatures=[
            Signature(role=seller_role, name=owner.full_name),
            Signature(role=buyer_role, name=data.lessee.full_name if data.lessee else BLANK),
            Signature(role="TESTEMUNHA 1", name=BLANK),
            Signature(role="TESTEMUNHA 2", name=BLANK),
        ],
        footer=FOOTER,
    )
