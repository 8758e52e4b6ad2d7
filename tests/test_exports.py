import csv
from io import StringIO

import pytest

from affiliate.exports import build_csv_bytes, build_docx_bytes, build_txt_bytes, slugify


def test_csv_has_one_row_per_script():
    scripts = ["Kamu sering haus?", 'Botol ini "anti bocor",\nserius.']
    rows = list(csv.DictReader(StringIO(build_csv_bytes(scripts).decode("utf-8"))))
    assert [r["index"] for r in rows] == ["1", "2"]
    assert rows[1]["script"] == scripts[1]


def test_txt_numbers_scripts():
    text = build_txt_bytes(["satu", "dua"]).decode("utf-8")
    assert text.startswith("Script #1\n\nsatu")
    assert "Script #2\n\ndua" in text


def test_slugify():
    assert slugify("Botol Minum 1L!") == "botol-minum-1l"
    assert slugify("   ") == "scripts"
    assert slugify("", default="rendered") == "rendered"


def test_slugify_truncates_long_text():
    slug = slugify("put this product on a sunny beach background with palm trees", max_len=20)
    assert slug == "put-this-product-on"
    assert not slug.endswith("-")


def test_docx_export_roundtrip():
    docx = pytest.importorskip("docx")
    bio = build_docx_bytes(["Paragraf satu\n\nParagraf dua"], duration=60, target_audience="Mahasiswa")
    doc = docx.Document(bio)
    texts = [p.text for p in doc.paragraphs]
    assert "Script #1" in texts
    assert "Paragraf dua" in texts
    assert "Target audience: Mahasiswa" in texts


def test_docx_export_without_library(mocker):
    mocker.patch.dict("sys.modules", {"docx": None})
    assert build_docx_bytes(["x"]) is None
