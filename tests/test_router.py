"""
Tests API email_builder : catalogue, rendu, export/import, design systems
"""
import json

import pytest
from fastapi.testclient import TestClient

from email_builder.app import create_app
from email_builder.codec import export_json
from email_builder.config import Settings
from email_builder.core import add_block, new_document
from email_builder.design import DesignSystemStore
from email_builder.renderer import LocalMarkupService, MarkupRenderError


class FailingService:
    def render(self, tree):
        raise MarkupRenderError("service de rendu injoignable")


# ── Fixtures ───────────────────────────────────────────────────────────────

@pytest.fixture
def store():
    return DesignSystemStore()


@pytest.fixture
def client(store):
    app = create_app(settings=Settings(), store=store, service=LocalMarkupService())
    with TestClient(app) as c:
        yield c


@pytest.fixture
def document():
    doc = add_block(add_block(new_document("API Launch"), "heading"), "button")
    return json.loads(export_json(doc))


# ── Catalogue ──────────────────────────────────────────────────────────────

class TestCatalog:

    def test_dix_categories(self, client):
        r = client.get("/email-builder/blocks/catalog")
        assert r.status_code == 200
        types = [b["type"] for b in r.json()["blocks"]]
        assert len(types) == 10
        assert "social-links" in types

    def test_defaut_en_camel_case(self, client):
        blocks = {b["type"]: b for b in client.get("/email-builder/blocks/catalog").json()["blocks"]}
        button = blocks["button"]["default"]
        assert button["backgroundColor"] == "#000000"
        assert button["text"] == "Click Here"
        assert "properties" in blocks["button"]["schema"]

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}


# ── Rendu ──────────────────────────────────────────────────────────────────

class TestRender:

    def test_html(self, client, document):
        r = client.post("/email-builder/render/html", json={"document": document})
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/html")
        assert r.text.startswith("<!DOCTYPE html")
        assert "Click Here" in r.text

    def test_html_design_system(self, client, document):
        document["blocks"][0]["color"] = None
        r = client.post("/email-builder/render/html",
                        json={"document": document, "designSystemId": "preset-dark"})
        assert r.status_code == 200
        assert "Tahoma, sans-serif" in r.text

    def test_html_design_system_actif_par_defaut(self, client, store, document):
        store.set_active("preset-elegant")
        r = client.post("/email-builder/render/html", json={"document": document})
        assert "Georgia, Times New Roman, serif" in r.text

    def test_design_system_inconnu_404(self, client, document):
        r = client.post("/email-builder/render/html",
                        json={"document": document, "designSystemId": "ds-missing"})
        assert r.status_code == 404

    def test_document_invalide_422(self, client):
        r = client.post("/email-builder/render/html", json={"document": {"name": "x"}})
        assert r.status_code == 422

    def test_service_en_echec_502(self, store, document):
        app = create_app(settings=Settings(), store=store, service=FailingService())
        with TestClient(app) as c:
            r = c.post("/email-builder/render/html", json={"document": document})
            assert r.status_code == 502
            r = c.post("/email-builder/export/html", json={"document": document})
            assert r.status_code == 502

    def test_source(self, client, document):
        r = client.post("/email-builder/render/source", json={"document": document})
        assert r.status_code == 200
        assert "export default EmailTemplate" in r.text
        assert document["blocks"][0]["id"] not in r.text

    def test_preview(self, client, document):
        heading_id = document["blocks"][0]["id"]
        r = client.post("/email-builder/render/preview", json={
            "document": document,
            "editingBlockId": heading_id,
            "simulateMode": "dark",
        })
        assert r.status_code == 200
        nodes = r.json()["nodes"]
        assert [n["block_id"] for n in nodes] == [b["id"] for b in document["blocks"]]
        assert nodes[0]["editing"] is True
        assert nodes[0]["edit_surface"] == document["blocks"][0]["content"]
        assert "Click Here" in nodes[1]["html"]

    def test_preview_mode_invalide_422(self, client, document):
        r = client.post("/email-builder/render/preview",
                        json={"document": document, "simulateMode": "sepia"})
        assert r.status_code == 422


# ── Export / import ────────────────────────────────────────────────────────

class TestExportImport:

    @pytest.mark.parametrize("fmt,media_type", [
        ("html", "text/html"),
        ("tsx", "text/typescript"),
        ("json", "application/json"),
    ])
    def test_export(self, client, document, fmt, media_type):
        r = client.post(f"/email-builder/export/{fmt}", json={"document": document})
        assert r.status_code == 200
        assert r.headers["content-type"].startswith(media_type)
        assert r.headers["content-disposition"] == f'attachment; filename="api-launch.{fmt}"'

    def test_export_nom_accentue(self, client, document):
        document["name"] = "Newsletter été"
        r = client.post("/email-builder/export/json", json={"document": document})
        assert r.status_code == 200
        assert r.headers["content-disposition"] == (
            "attachment; filename=\"newsletter-ete.json\"; "
            "filename*=UTF-8''newsletter-%C3%A9t%C3%A9.json"
        )

    def test_export_nom_avec_guillemets(self, client, document):
        document["name"] = 'My "Big" News'
        r = client.post("/email-builder/export/html", json={"document": document})
        assert r.status_code == 200
        disposition = r.headers["content-disposition"]
        assert disposition.startswith('attachment; filename="my-big-news.html"')
        assert "filename*=UTF-8''my-%22big%22-news.html" in disposition

    def test_export_json_reimportable(self, client, document):
        exported = client.post("/email-builder/export/json", json={"document": document}).text
        r = client.post("/email-builder/import", content=exported)
        assert r.status_code == 200
        assert r.json() == document

    def test_export_format_inconnu_404(self, client, document):
        r = client.post("/email-builder/export/pdf", json={"document": document})
        assert r.status_code == 404

    def test_import_categorie_inconnue_422(self, client, document):
        document["blocks"].append({"type": "carousel", "id": "x"})
        r = client.post("/email-builder/import", content=json.dumps(document))
        assert r.status_code == 422
        detail = r.json()["detail"]
        assert detail["message"]
        assert detail["errors"]

    def test_import_json_illisible_422(self, client):
        r = client.post("/email-builder/import", content="{oops")
        assert r.status_code == 422


# ── Design systems ─────────────────────────────────────────────────────────

class TestDesignSystems:

    def test_liste(self, client):
        data = client.get("/email-builder/design-systems").json()
        assert data["activeId"] is None
        presets = [ds for ds in data["designSystems"] if ds["preset"]]
        assert [ds["id"] for ds in presets][0] == "preset-default"
        assert len(presets) == 5
        assert "global" in presets[0]["tokens"]

    def test_creation(self, client):
        r = client.post("/email-builder/design-systems", json={"name": "Brand"})
        assert r.status_code == 201
        body = r.json()
        assert body["id"].startswith("ds-")
        assert body["preset"] is False
        assert body["tokens"]["button"]["backgroundColor"] == "#000000"

    def test_mise_a_jour(self, client):
        ds_id = client.post("/email-builder/design-systems", json={"name": "Brand"}).json()["id"]
        r = client.patch(f"/email-builder/design-systems/{ds_id}",
                         json={"name": "Brand v2", "tokens": {"heading": {"color": "#ff0000"}}})
        assert r.status_code == 200
        assert r.json()["name"] == "Brand v2"
        assert r.json()["tokens"]["heading"]["color"] == "#ff0000"

    def test_mise_a_jour_invalide_422(self, client):
        ds_id = client.post("/email-builder/design-systems", json={"name": "Brand"}).json()["id"]
        r = client.patch(f"/email-builder/design-systems/{ds_id}",
                         json={"tokens": {"carousel": {"color": "#ff0000"}}})
        assert r.status_code == 422

    def test_preset_inchange(self, client):
        r = client.patch("/email-builder/design-systems/preset-bold",
                         json={"tokens": {"button": {"borderRadius": 0}}})
        assert r.status_code == 200
        assert r.json()["tokens"]["button"]["borderRadius"] == 24

    def test_mise_a_jour_inconnu_404(self, client):
        r = client.patch("/email-builder/design-systems/ds-missing", json={"name": "x"})
        assert r.status_code == 404

    def test_duplication(self, client):
        r = client.post("/email-builder/design-systems/preset-bold/duplicate")
        assert r.status_code == 201
        assert r.json()["name"] == "Bold (Copy)"
        assert r.json()["preset"] is False
        r = client.post("/email-builder/design-systems/ds-missing/duplicate")
        assert r.status_code == 404

    def test_suppression(self, client):
        ds_id = client.post("/email-builder/design-systems", json={"name": "Brand"}).json()["id"]
        client.put("/email-builder/design-systems/active", json={"id": ds_id})
        r = client.delete(f"/email-builder/design-systems/{ds_id}")
        assert r.json() == {"deleted": True, "activeId": None}
        assert client.delete(f"/email-builder/design-systems/{ds_id}").status_code == 404

    def test_suppression_preset_refusee(self, client):
        r = client.delete("/email-builder/design-systems/preset-dark")
        assert r.status_code == 200
        assert r.json()["deleted"] is False
        ids = [ds["id"] for ds in client.get("/email-builder/design-systems").json()["designSystems"]]
        assert "preset-dark" in ids

    def test_activation(self, client):
        r = client.put("/email-builder/design-systems/active", json={"id": "preset-minimal"})
        assert r.json() == {"activeId": "preset-minimal"}
        r = client.put("/email-builder/design-systems/active", json={"id": None})
        assert r.json() == {"activeId": None}
        r = client.put("/email-builder/design-systems/active", json={"id": "ds-missing"})
        assert r.status_code == 404


# ── Démarrage ──────────────────────────────────────────────────────────────

def test_design_system_par_defaut_au_demarrage():
    store = DesignSystemStore()
    create_app(settings=Settings(default_design_system="preset-dark"), store=store, service=LocalMarkupService())
    assert store.active_id == "preset-dark"


def test_design_system_par_defaut_inconnu_ignore():
    store = DesignSystemStore()
    create_app(settings=Settings(default_design_system="ds-missing"), store=store, service=LocalMarkupService())
    assert store.active_id is None
