"""Tests codec JSON + exports fichiers + templates sauvegardés."""
import json

import pytest

from email_builder.blocks import ColumnsBlock, SpacerBlock, TextBlock
from email_builder.codec import DocumentImportError, export_json, import_json
from email_builder.core import EmailDocument, add_block, new_document, update_settings
from email_builder.exports import MEDIA_TYPES, content_disposition, export_document, export_filename
from email_builder.renderer import LocalMarkupService, render_html, render_source
from email_builder.richtext import parse
from email_builder.templates import SavedTemplate, most_recent


def _full_document():
    doc = new_document("Spring Launch")
    for block_type in ("header", "heading", "text", "image", "button", "divider", "spacer", "social-links", "footer"):
        doc = add_block(doc, block_type)
    rich = parse({"type": "doc", "content": [
        {"type": "paragraph", "content": [
            {"type": "text", "text": "Bold ", "marks": [{"type": "bold"}]},
            {"type": "text", "text": "link", "marks": [{"type": "link", "attrs": {"href": "https://x.io"}}]},
        ]},
        {"type": "bulletList", "content": [
            {"type": "listItem", "content": [{"type": "paragraph", "content": [{"type": "text", "text": "item"}]}]},
        ]},
    ]})
    columns = ColumnsBlock(
        id="cols-1", columns=3, gap=8,
        content=((TextBlock(id="inner-t", content=rich, color=None),), (SpacerBlock(id="inner-s", height=12),), ()),
    )
    doc = doc.model_copy(update={"blocks": doc.blocks + (columns,)})
    return update_settings(doc, {"previewText": "Fresh picks inside"})


# ── Aller-retour ─────────────────────────────────────────────────────────────

def test_roundtrip_full_document():
    doc = _full_document()
    assert import_json(export_json(doc)) == doc


def test_roundtrip_is_stable_text():
    text = export_json(_full_document())
    assert export_json(import_json(text)) == text


def test_import_accepts_bytes():
    doc = _full_document()
    assert import_json(export_json(doc).encode("utf-8")) == doc


def test_export_uses_camel_case_keys():
    text = export_json(_full_document())
    assert text.startswith('{\n  "name"')
    data = json.loads(text)
    assert data["settings"]["backgroundColor"] == "#f4f4f5"
    assert data["settings"]["previewText"] == "Fresh picks inside"
    button = next(b for b in data["blocks"] if b["type"] == "button")
    assert button["backgroundColor"] == "#000000"
    assert "background_color" not in button


def test_export_keeps_canonical_rich_text():
    data = json.loads(export_json(_full_document()))
    cols = data["blocks"][-1]
    inner = cols["content"][0][0]["content"]
    assert inner["type"] == "doc"
    assert inner["content"][0]["content"][0]["marks"] == [{"type": "bold"}]


def test_export_keeps_non_ascii():
    doc = new_document("Été")
    assert '"Été"' in export_json(doc)


# ── Rejets ───────────────────────────────────────────────────────────────────

def _payload():
    return json.loads(export_json(_full_document()))


def test_reject_unknown_block_type():
    data = _payload()
    data["blocks"].append({"type": "unknown-type", "id": "x"})
    with pytest.raises(DocumentImportError) as exc:
        import_json(json.dumps(data))
    assert exc.value.errors
    assert all("loc" in e and "msg" in e for e in exc.value.errors)


def test_reject_missing_settings():
    data = _payload()
    del data["settings"]
    with pytest.raises(DocumentImportError) as exc:
        import_json(json.dumps(data))
    assert ["settings"] in [e["loc"] for e in exc.value.errors]


@pytest.mark.parametrize("text", ["{not json", "[]", "42", '"doc"', ""])
def test_reject_unreadable_or_non_object(text):
    with pytest.raises(DocumentImportError):
        import_json(text)


def test_reject_ill_typed_nested_content():
    data = _payload()
    data["blocks"][-1]["content"][1] = [{"type": "spacer", "id": "bad", "height": "tall"}]
    with pytest.raises(DocumentImportError):
        import_json(json.dumps(data))


def test_reject_bad_rich_text_root():
    data = _payload()
    text = next(b for b in data["blocks"] if b["type"] == "text")
    text["content"] = {"type": "paragraph", "content": []}
    with pytest.raises(DocumentImportError):
        import_json(json.dumps(data))


def test_reject_column_count_mismatch():
    data = _payload()
    data["blocks"][-1]["columns"] = 2
    with pytest.raises(DocumentImportError):
        import_json(json.dumps(data))


def test_reject_duplicate_ids():
    data = _payload()
    data["blocks"][1]["id"] = data["blocks"][0]["id"]
    with pytest.raises(DocumentImportError):
        import_json(json.dumps(data))


def test_import_error_is_value_error():
    with pytest.raises(ValueError):
        import_json("{}")


# ── Exports fichiers ─────────────────────────────────────────────────────────

@pytest.mark.parametrize("name,expected", [
    ("My Newsletter", "my-newsletter"),
    ("  Spring   Launch  ", "spring-launch"),
    ("   ", "email"),
])
def test_export_filename(name, expected):
    assert export_filename(name, "html") == f"{expected}.html"


@pytest.mark.parametrize("filename,expected", [
    ("api-launch.html", 'attachment; filename="api-launch.html"'),
    ("\u00e9t\u00e9.tsx", "attachment; filename=\"ete.tsx\"; filename*=UTF-8''%C3%A9t%C3%A9.tsx"),
])
def test_content_disposition(filename, expected):
    assert content_disposition(filename) == expected


def test_export_document_formats():
    doc = _full_document()
    html = export_document(doc, "html", service=LocalMarkupService())
    tsx = export_document(doc, "tsx")
    raw = export_document(doc, "json")

    assert (html.filename, html.media_type) == ("spring-launch.html", "text/html")
    assert (tsx.filename, tsx.media_type) == ("spring-launch.tsx", "text/typescript")
    assert (raw.filename, raw.media_type) == ("spring-launch.json", "application/json")

    assert html.content == render_html(doc)
    assert tsx.content == render_source(doc)
    assert import_json(raw.content) == doc


def test_export_unknown_format():
    with pytest.raises(ValueError):
        export_document(new_document(), "pdf")


def test_media_types_cover_formats():
    assert set(MEDIA_TYPES) == {"html", "tsx", "json"}


# ── Templates sauvegardés ────────────────────────────────────────────────────

def test_template_snapshot_and_alias():
    doc = _full_document()
    saved = SavedTemplate.snapshot(doc)
    assert saved.name == "Spring Launch"
    assert saved.updated_at > 0
    data = saved.model_dump(mode="json", by_alias=True)
    assert "updatedAt" in data
    assert SavedTemplate.model_validate(data) == saved


def test_template_snapshot_keeps_id():
    saved = SavedTemplate.snapshot(new_document(), template_id="tpl-1")
    assert saved.id == "tpl-1"


def test_most_recent():
    doc = new_document()
    older = SavedTemplate(id="a", name="A", document=doc, updated_at=1000)
    newer = SavedTemplate(id="b", name="B", document=doc, updated_at=2000)
    assert most_recent([older, newer]) == newer
    assert most_recent([]) is None


def test_template_document_is_validated():
    with pytest.raises(ValueError):
        SavedTemplate.model_validate({"id": "a", "name": "A", "document": {"name": "x"}, "updatedAt": 1})


def test_model_validate_from_exported_dict():
    a = new_document("Same")
    b = EmailDocument.model_validate(json.loads(export_json(a)))
    assert a == b
