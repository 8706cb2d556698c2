"""Tests blocs + document + opérations pures (add/update/delete/move)."""
import pytest
from pydantic import ValidationError

from email_builder.blocks import (
    BLOCK_TYPES,
    ButtonBlock,
    ColumnsBlock,
    HeadingBlock,
    TextBlock,
)
from email_builder.core import (
    EmailDocument,
    InvalidBlockUpdate,
    add_block,
    create_block,
    delete_block,
    find_block,
    move_block,
    new_document,
    rename_document,
    update_block,
    update_settings,
)
from email_builder.design import get_preset
from email_builder.richtext import Mark, RichTextNode, create_empty_content, plain_text


def _doc(*types):
    doc = new_document("Test")
    for block_type in types:
        doc = add_block(doc, block_type)
    return doc


def _ids(doc):
    return [b.id for b in doc.blocks]


# ── Valeurs par défaut ───────────────────────────────────────────────────────

@pytest.mark.parametrize("block_type", BLOCK_TYPES)
def test_default_block_is_complete(block_type):
    block = create_block(block_type)
    assert block.type == block_type
    assert block.id
    # l'instance par défaut se revalide telle quelle
    assert type(block).model_validate(block.model_dump()) == block


def test_default_values_follow_editor_palette():
    heading = create_block("heading")
    assert plain_text(heading.content) == "Your Heading Here"
    assert (heading.level, heading.align, heading.color) == (1, "center", "#000000")

    button = create_block("button")
    assert (button.text, button.url) == ("Click Here", "https://example.com")
    assert (button.background_color, button.text_color, button.border_radius) == ("#000000", "#ffffff", 4)

    social = create_block("social-links")
    assert [l.platform for l in social.links] == ["twitter", "facebook", "instagram"]
    assert social.icon_size == 24

    columns = create_block("columns")
    assert columns.columns == 2 and columns.content == ((), ())


def test_fresh_ids():
    assert create_block("text").id != create_block("text").id


def test_unknown_block_type():
    with pytest.raises(ValueError):
        create_block("carousel")


def test_blocks_are_immutable():
    block = create_block("spacer")
    with pytest.raises(ValidationError):
        block.height = 10


def test_built_rich_text_must_have_doc_root():
    paragraph = RichTextNode(type="paragraph", content=(RichTextNode(type="text", text="Hi"),))
    with pytest.raises(ValidationError):
        TextBlock(id="t", content=paragraph)


def test_built_rich_text_link_needs_href():
    run = RichTextNode(type="text", text="Hi", marks=(Mark(type="link"),))
    doc_node = RichTextNode(type="doc", content=(RichTextNode(type="paragraph", content=(run,)),))
    with pytest.raises(ValidationError):
        TextBlock(id="t", content=doc_node)


def test_built_rich_text_valid_is_kept():
    content = create_empty_content("Hello")
    assert TextBlock(id="t", content=content).content == content


# ── Columns ──────────────────────────────────────────────────────────────────

def test_columns_slot_count_must_match():
    with pytest.raises(ValidationError):
        ColumnsBlock(id="c", columns=3, content=((), ()))


def test_columns_cannot_nest_columns():
    with pytest.raises(ValidationError):
        ColumnsBlock.model_validate({
            "id": "c",
            "columns": 2,
            "content": [[{"type": "columns", "id": "x", "columns": 2, "content": [[], []]}], []],
        })


def test_columns_accept_one_level_of_blocks():
    block = ColumnsBlock.model_validate({
        "id": "c",
        "columns": 2,
        "gap": 8,
        "content": [[{"type": "spacer", "id": "s1", "height": 10}], []],
    })
    assert [b.id for b in block.inner_blocks()] == ["s1"]


# ── Document ─────────────────────────────────────────────────────────────────

def test_new_document_defaults():
    doc = new_document()
    assert doc.name == "Untitled Email"
    assert doc.blocks == ()
    assert doc.settings.background_color == "#f4f4f5"
    assert doc.settings.content_width == 600
    assert doc.settings.preview_text is None


def test_new_document_seeded_from_design_system():
    doc = new_document("Promo", design_system=get_preset("preset-minimal"))
    assert doc.settings.background_color == "#ffffff"
    assert doc.settings.content_width == 560


def test_duplicate_ids_rejected():
    block = create_block("text")
    settings = new_document().settings
    with pytest.raises(ValidationError):
        EmailDocument(name="x", blocks=(block, block), settings=settings)


def test_duplicate_ids_rejected_in_columns():
    text = create_block("text")
    columns = ColumnsBlock(id="cols", columns=2, content=((text,), ()))
    with pytest.raises(ValidationError):
        EmailDocument(name="x", blocks=(text, columns), settings=new_document().settings)


# ── add / delete ─────────────────────────────────────────────────────────────

def test_add_block_appends_without_mutating():
    doc = _doc("heading")
    doc2 = add_block(doc, "button")
    assert len(doc.blocks) == 1
    assert [b.type for b in doc2.blocks] == ["heading", "button"]


def test_delete_block():
    doc = _doc("heading", "text", "button")
    target = doc.blocks[1].id
    doc2 = delete_block(doc, target)
    assert target not in _ids(doc2)
    assert len(doc.blocks) == 3


def test_delete_absent_block_is_noop():
    doc = _doc("heading")
    assert delete_block(doc, "missing") == doc


def test_find_block():
    doc = _doc("heading", "text")
    assert find_block(doc, doc.blocks[1].id).type == "text"
    assert find_block(doc, "missing") is None


# ── update ───────────────────────────────────────────────────────────────────

def test_update_block_merges_fields():
    doc = _doc("heading")
    block_id = doc.blocks[0].id
    doc2 = update_block(doc, block_id, {"color": "#ff0000", "level": 2})
    updated = doc2.blocks[0]
    assert updated.color == "#ff0000"
    assert updated.level == 2
    assert updated.id == block_id
    assert updated.content == doc.blocks[0].content
    assert doc.blocks[0].color == "#000000"


def test_update_block_accepts_json_aliases():
    doc = _doc("button")
    doc2 = update_block(doc, doc.blocks[0].id, {"backgroundColor": "#123456", "border_radius": 0})
    assert doc2.blocks[0].background_color == "#123456"
    assert doc2.blocks[0].border_radius == 0


def test_update_block_none_removes_override():
    doc = _doc("text")
    doc2 = update_block(doc, doc.blocks[0].id, {"color": None})
    assert doc2.blocks[0].color is None


def test_update_block_rich_text_from_canonical():
    doc = _doc("text")
    content = {"type": "doc", "content": [{"type": "paragraph", "content": [
        {"type": "text", "text": "Bonjour", "marks": [{"type": "bold"}]},
    ]}]}
    doc2 = update_block(doc, doc.blocks[0].id, {"content": content})
    assert plain_text(doc2.blocks[0].content) == "Bonjour"


def test_update_absent_block_is_noop():
    doc = _doc("heading")
    assert update_block(doc, "missing", {"color": "#ff0000"}) is doc


def test_update_unknown_field_rejected():
    doc = _doc("heading")
    with pytest.raises(InvalidBlockUpdate):
        update_block(doc, doc.blocks[0].id, {"fontSize": 12})


@pytest.mark.parametrize("field", ["id", "type"])
def test_update_identity_rejected(field):
    doc = _doc("heading")
    with pytest.raises(InvalidBlockUpdate):
        update_block(doc, doc.blocks[0].id, {field: "other"})


def test_update_invalid_value_rejected():
    doc = _doc("heading")
    with pytest.raises(InvalidBlockUpdate):
        update_block(doc, doc.blocks[0].id, {"level": 5})


def test_update_invalid_rich_text_rejected():
    doc = _doc("text")
    with pytest.raises(InvalidBlockUpdate):
        update_block(doc, doc.blocks[0].id, {"content": {"type": "paragraph"}})


def test_update_columns_count_resizes_slots():
    doc = _doc("columns")
    block_id = doc.blocks[0].id
    doc3 = update_block(doc, block_id, {"columns": 3})
    assert len(doc3.blocks[0].content) == 3
    doc2 = update_block(doc3, block_id, {"columns": 2})
    assert len(doc2.blocks[0].content) == 2


def test_update_columns_rejects_nested_columns():
    doc = _doc("columns")
    nested = create_block("columns").model_dump()
    with pytest.raises(InvalidBlockUpdate):
        update_block(doc, doc.blocks[0].id, {"content": [[nested], []]})


def test_update_columns_rejects_duplicate_nested_id():
    doc = _doc("text", "columns")
    clash = doc.blocks[0].model_dump()
    with pytest.raises(InvalidBlockUpdate):
        update_block(doc, doc.blocks[1].id, {"content": [[clash], []]})


# ── move ─────────────────────────────────────────────────────────────────────

def test_move_first_up_is_noop():
    doc = _doc("heading", "text", "button")
    assert _ids(move_block(doc, doc.blocks[0].id, "up")) == _ids(doc)


def test_move_last_down_is_noop():
    doc = _doc("heading", "text", "button")
    assert _ids(move_block(doc, doc.blocks[-1].id, "down")) == _ids(doc)


def test_move_swaps_with_neighbour():
    doc = _doc("heading", "text", "button")
    a, b, c = _ids(doc)
    assert _ids(move_block(doc, b, "up")) == [b, a, c]
    assert _ids(move_block(doc, b, "down")) == [a, c, b]


def test_move_absent_block_is_noop():
    doc = _doc("heading", "text")
    assert _ids(move_block(doc, "missing", "up")) == _ids(doc)


def test_move_invalid_direction():
    doc = _doc("heading", "text")
    with pytest.raises(ValueError):
        move_block(doc, doc.blocks[0].id, "left")


# ── Réglages ─────────────────────────────────────────────────────────────────

def test_update_settings_and_rename():
    doc = update_settings(new_document(), {"backgroundColor": "#000000", "previewText": "Hi"})
    doc = rename_document(doc, "Launch")
    assert doc.settings.background_color == "#000000"
    assert doc.settings.preview_text == "Hi"
    assert doc.name == "Launch"


def test_update_settings_invalid():
    with pytest.raises(InvalidBlockUpdate):
        update_settings(new_document(), {"contentWidth": 0})


def test_explicit_blocks_construction():
    heading = HeadingBlock(id="h", content=create_empty_content("Hello"))
    button = ButtonBlock(id="b", text="Go", url="https://x.io")
    text = TextBlock(id="t", content={"type": "doc", "content": []})
    assert heading.color is None and heading.level == 1
    assert button.background_color is None
    assert text.content.children == ()
