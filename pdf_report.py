"""
pdf_report.py
=============
Generates a printable Ghadi-Pala PDF report.
Uses ReportLab for PDF generation.

Install: pip install reportlab
"""

from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import cm
from reportlab.lib.colors import HexColor
from reportlab.platypus import (
    SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle, HRFlowable,
)
from reportlab.lib.enums import TA_CENTER, TA_LEFT
import io
from datetime import datetime

from ghadi_engine.core.models import CalculationResult

# ── Color palette ──────────────────────────────────────────────
VOID      = HexColor("#0B0B0F")
SAFFRON   = HexColor("#E8A33D")
SURFACE   = HexColor("#1E1C28")
MUTED     = HexColor("#6E6A7C")
WHITE     = HexColor("#FFFFFF")
ROW_ALT   = HexColor("#FAFAFA")
GRID      = HexColor("#DDDDDD")

_TABLE_BASE = [
    ("FONTNAME",     (0,0), (-1,-1), "Helvetica"),
    ("FONTSIZE",     (0,0), (-1,-1), 9),
    ("ROWBACKGROUNDS",(0,0),(-1,-1), [ROW_ALT, WHITE]),
    ("GRID",         (0,0), (-1,-1), 0.3, GRID),
    ("TOPPADDING",   (0,0), (-1,-1), 5),
    ("BOTTOMPADDING",(0,0), (-1,-1), 5),
    ("LEFTPADDING",  (0,0), (-1,-1), 6),
]


def generate_pdf_report(result: CalculationResult, name: str = "Native") -> bytes:
    """
    Generate a Ghadi-Pala PDF report for one calculation.
    Returns PDF as bytes.
    """
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        rightMargin=2*cm, leftMargin=2*cm,
        topMargin=2*cm, bottomMargin=2*cm,
        title=f"Ghadi-Pala Report — {name}",
        author="Ghadi-Pala Calculator",
    )

    styles = getSampleStyleSheet()
    story = []

    # ── Custom styles ──────────────────────────────────────────
    title_style = ParagraphStyle(
        "Title", parent=styles["Normal"],
        fontSize=26, fontName="Helvetica",
        textColor=VOID, alignment=TA_CENTER,
        spaceAfter=6,
    )
    subtitle_style = ParagraphStyle(
        "Subtitle", parent=styles["Normal"],
        fontSize=11, fontName="Helvetica",
        textColor=MUTED, alignment=TA_CENTER,
        spaceAfter=20,
    )
    result_style = ParagraphStyle(
        "Result", parent=styles["Normal"],
        fontSize=20, fontName="Helvetica-Bold",
        textColor=VOID, alignment=TA_CENTER,
        spaceBefore=6, spaceAfter=6, leading=26,
    )
    body_style = ParagraphStyle(
        "Body", parent=styles["Normal"],
        fontSize=9, fontName="Helvetica",
        textColor=VOID, spaceAfter=4,
        leading=14,
    )
    disclaimer_style = ParagraphStyle(
        "Disclaimer", parent=styles["Normal"],
        fontSize=7, fontName="Helvetica-Oblique",
        textColor=MUTED, alignment=TA_CENTER,
        spaceBefore=20,
    )

    def section_bar(text):
        return Table(
            [[Paragraph(text, ParagraphStyle("SectionBar", parent=styles["Normal"],
                fontSize=11, fontName="Helvetica-Bold",
                textColor=WHITE, alignment=TA_LEFT))]],
            colWidths=[17*cm],
            style=TableStyle([
                ("BACKGROUND",    (0,0), (-1,-1), VOID),
                ("TOPPADDING",    (0,0), (-1,-1), 8),
                ("BOTTOMPADDING", (0,0), (-1,-1), 8),
                ("LEFTPADDING",   (0,0), (-1,-1), 12),
                ("RIGHTPADDING",  (0,0), (-1,-1), 12),
            ])
        )

    # ── HEADER ────────────────────────────────────────────────
    story.append(Paragraph("GHADI · PALA", title_style))
    story.append(Paragraph("Vedic Birth Time Report", subtitle_style))
    story.append(HRFlowable(width="100%", thickness=0.5, color=SAFFRON))
    story.append(Spacer(1, 0.4*cm))

    # ── BIRTH DETAILS ─────────────────────────────────────────
    story.append(section_bar("BIRTH DETAILS"))
    story.append(Spacer(1, 0.3*cm))

    coord = result.coordinate
    if result.sunrise_source == "manual":
        sunrise_label = "Manual entry"
    elif result.utc_offset_hours:
        sunrise_label = f"Estimated (UTC{result.utc_offset_hours:+.2f})"
    else:
        sunrise_label = "Estimated"
    details_data = [
        ["Name", name, "Birth Date", result.birth.strftime("%Y-%m-%d")],
        ["Location", result.city_name or "—", "Birth Time", result.birth_time_formatted],
        ["Latitude", f"{coord.latitude:.4f}°" if coord else "—",
         "Sunrise", f"{result.sunrise_time} ({result.sunrise.strftime('%Y-%m-%d')})"],
        ["Longitude", f"{coord.longitude:.4f}°" if coord else "—",
         "Sunrise Source", sunrise_label],
    ]
    det_table = Table(details_data, colWidths=[3*cm, 5.5*cm, 3*cm, 5.5*cm])
    det_table.setStyle(TableStyle(_TABLE_BASE + [
        ("FONTNAME",  (0,0), (0,-1), "Helvetica-Bold"),
        ("FONTNAME",  (2,0), (2,-1), "Helvetica-Bold"),
        ("TEXTCOLOR", (0,0), (0,-1), MUTED),
        ("TEXTCOLOR", (2,0), (2,-1), MUTED),
    ]))
    story.append(det_table)
    story.append(Spacer(1, 0.5*cm))

    # ── RESULT ────────────────────────────────────────────────
    story.append(section_bar("VEDIC TIME RESULT"))
    story.append(Spacer(1, 0.3*cm))
    story.append(Paragraph(
        f"{result.ghadi} Ghadi &nbsp; {result.pala} Pala &nbsp; {result.vighati} Vighati",
        result_style
    ))
    story.append(Paragraph(
        f"<b>Time since sunrise:</b> {result.time_difference_formatted} "
        f"({result.time_difference_minutes} minutes)",
        ParagraphStyle("Centered", parent=body_style, alignment=TA_CENTER)
    ))
    story.append(Spacer(1, 0.5*cm))

    # ── CALCULATION BREAKDOWN ─────────────────────────────────
    story.append(section_bar("CALCULATION BREAKDOWN"))
    story.append(Spacer(1, 0.3*cm))
    calc = result.calculations
    calc_data = [
        ["Total seconds from sunrise", f"{calc.get('total_seconds', '—')}s"],
        ["Ghadi", calc.get("ghadi_calculation", "—")],
        ["Pala", calc.get("pala_calculation", "—")],
        ["Vighati", calc.get("vighati_calculation", "—")],
    ]
    calc_table = Table(calc_data, colWidths=[5*cm, 12*cm])
    calc_table.setStyle(TableStyle(_TABLE_BASE + [
        ("FONTNAME",  (0,0), (0,-1), "Helvetica-Bold"),
        ("TEXTCOLOR", (0,0), (0,-1), MUTED),
    ]))
    story.append(calc_table)
    story.append(Spacer(1, 0.5*cm))

    # ── CONVERSION REFERENCE ──────────────────────────────────
    story.append(section_bar("CONVERSION REFERENCE"))
    story.append(Spacer(1, 0.3*cm))
    ref_table = Table(
        [["Unit", "Equals", "Seconds"],
         ["1 Ghadi", "24 minutes", "1,440"],
         ["1 Pala", "1/60 Ghadi", "24"],
         ["1 Vighati", "1/60 Pala", "0.4"]],
        colWidths=[5*cm, 6*cm, 6*cm]
    )
    ref_table.setStyle(TableStyle(_TABLE_BASE + [
        ("FONTNAME",   (0,0), (-1,0), "Helvetica-Bold"),
        ("BACKGROUND", (0,0), (-1,0), SURFACE),
        ("TEXTCOLOR",  (0,0), (-1,0), SAFFRON),
    ]))
    story.append(ref_table)

    # ── FOOTER DISCLAIMER ─────────────────────────────────────
    story.append(HRFlowable(width="100%", thickness=0.5, color=SAFFRON))
    story.append(Paragraph(
        f"Generated by Ghadi-Pala Calculator · {datetime.now().strftime('%d %B %Y')}",
        disclaimer_style
    ))
    story.append(Paragraph(
        "Sunrise is estimated with a simplified solar-declination formula and can differ "
        "from a printed panchang by several minutes. Enter a manual sunrise time for "
        "exact agreement with your almanac.",
        disclaimer_style
    ))

    # ── BUILD PDF ─────────────────────────────────────────────
    doc.build(story)
    buffer.seek(0)
    return buffer.read()
