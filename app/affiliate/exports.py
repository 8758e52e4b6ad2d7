import csv, re
from io import BytesIO, StringIO
from typing import List, Optional


def slugify(s: str, default: str = "scripts", max_len: int = 40) -> str:
    """Download file stem from free text (product details, render prompt)."""
    s = re.sub(r"[^a-z0-9]+", "-", (s or "").strip().lower())
    return s[:max_len].strip("-") or default


def build_csv_bytes(scripts: List[str]) -> bytes:
    sio = StringIO()
    writer = csv.DictWriter(sio, fieldnames=["index", "script"])
    writer.writeheader()
    for i, script in enumerate(scripts, 1):
        writer.writerow({"index": i, "script": script})
    return sio.getvalue().encode("utf-8")


def build_txt_bytes(scripts: List[str]) -> bytes:
    blocks = [f"Script #{i}\n\n{script}" for i, script in enumerate(scripts, 1)]
    return ("\n\n" + "-" * 40 + "\n\n").join(blocks).encode("utf-8")


def build_docx_bytes(scripts: List[str], duration: Optional[int] = None,
                     target_audience: str = "") -> Optional[BytesIO]:
    """Word export; returns None when python-docx is not installed."""
    try:
        from docx import Document
        from docx.shared import Pt
    except ImportError:
        return None

    doc = Document()
    doc.add_heading("Affiliate video scripts", level=1)
    if duration:
        p = doc.add_paragraph(); r = p.add_run(f"Duration: ~{duration} seconds"); r.font.size = Pt(12)
    if target_audience:
        p = doc.add_paragraph(); r = p.add_run(f"Target audience: {target_audience}"); r.font.size = Pt(12)

    for i, script in enumerate(scripts, 1):
        doc.add_heading(f"Script #{i}", level=2)
        for para in script.split("\n\n"):
            doc.add_paragraph(para.strip())

    bio = BytesIO()
    doc.save(bio)
    bio.seek(0)
    return bio
