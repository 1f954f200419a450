"""PDF rendering of contract documents with ReportLab Platypus."""

from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.pdfgen.canvas import Canvas
from reportlab.platypus import BaseDocTemplate, Frame, KeepTogether, PageTemplate, Paragraph, Spacer, Table, TableStyle

from sogrinha.core.modules.document.models import ContractContent

MARGIN = 2 * cm


def get_contract_styles() -> dict[str, ParagraphStyle]:
    """Paragraph styles used by contract documents."""
    base = getSampleStyleSheet()
    return {
        "Date": ParagraphStyle(
            "ContractDate", parent=base["Normal"], fontSize=10, textColor=colors.HexColor("#666666"), alignment=TA_RIGHT
        ),
        "Title": ParagraphStyle(
            "ContractTitle",
            parent=base["Heading1"],
            fontName="Helvetica-Bold",
            fontSize=16,
            alignment=TA_CENTER,
            spaceBefore=12,
            spaceAfter=12,
        ),
        "Number": ParagraphStyle(
            "ContractNumber", parent=base["Normal"], fontSize=10, textColor=colors.HexColor("#666666"), spaceAfter=12
        ),
        "SectionTitle": ParagraphStyle(
            "ContractSectionTitle",
            parent=base["Heading2"],
            fontName="Helvetica-Bold",
            fontSize=12,
            spaceBefore=10,
            spaceAfter=6,
        ),
        "Body": ParagraphStyle(
            "ContractBody", parent=base["BodyText"], fontName="Helvetica", fontSize=10, leading=15, alignment=TA_JUSTIFY
        ),
        "Centered": ParagraphStyle("ContractCentered", parent=base["Normal"], fontSize=10, alignment=TA_CENTER),
        "Signature": ParagraphStyle(
            "ContractSignature", parent=base["Normal"], fontSize=9, leading=12, alignment=TA_CENTER
        ),
    }


def _draw_footer(text: str):
    def on_page(canvas: Canvas, doc: BaseDocTemplate) -> None:
        canvas.saveState()
        canvas.setFont("Helvetica", 8)
        canvas.setFillColor(colors.HexColor("#666666"))
        canvas.drawCentredString(A4[0] / 2, MARGIN / 2, text)
        canvas.drawRightString(A4[0] - MARGIN, MARGIN / 2, str(doc.page))
        canvas.restoreState()

    return on_page


def _signature_table(content: ContractContent, styles: dict[str, ParagraphStyle], width: float) -> Table:
    cells = [
        Paragraph(f"{escape(signature.name)}<br/>{escape(signature.role)}", styles["Signature"])
        for signature in content.signatures
    ]
    column_width = width / len(cells)
    table = Table([cells], colWidths=[column_width] * len(cells))
    table.setStyle(
        TableStyle(
            [
                ("LINEABOVE", (0, 0), (-1, 0), 0.8, colors.black),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ("LEFTPADDING", (0, 0), (-1, -1), 8),
                ("RIGHTPADDING", (0, 0), (-1, -1), 8),
            ]
        )
    )
    return table


def render_contract_pdf(content: ContractContent) -> bytes:
    """Render a filled contract to PDF bytes (A4, footer on every page)."""
    buffer = BytesIO()
    doc = BaseDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=MARGIN,
        rightMargin=MARGIN,
        topMargin=MARGIN,
        bottomMargin=MARGIN,
        title=content.title,
    )
    frame = Frame(doc.leftMargin, doc.bottomMargin, doc.width, doc.height, id="body")
    doc.addPageTemplates([PageTemplate(id="contract", frames=[frame], onPage=_draw_footer(content.footer))])

    styles = get_contract_styles()
    story = [
        Paragraph(escape(content.date_line), styles["Date"]),
        Paragraph(escape(content.title), styles["Title"]),
        Paragraph(escape(content.number), styles["Number"]),
    ]
    for section in content.sections:
        story.append(Paragraph(escape(section.title), styles["SectionTitle"]))
        for paragraph in section.paragraphs:
            story.append(Paragraph(escape(paragraph), styles["Body"]))
            story.append(Spacer(1, 0.2 * cm))

    # Place, date and signatures never split across pages
    story.append(
        KeepTogether(
            [
                Spacer(1, 1 * cm),
                Paragraph(escape(content.place_and_date), styles["Centered"]),
                Spacer(1, 2 * cm),
                _signature_table(content, styles, doc.width),
            ]
        )
    )

    doc.build(story)
    return buffer.getvalue()
