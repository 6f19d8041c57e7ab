"""
Tests for /companies endpoints.

Seed data: company "apple" linked to industries "tech" then "famous".
"""

from biztime.api.models.company_model import Company
from biztime.api.models.industry_model import CompanyIndustry
from biztime.api.models.invoice_model import Invoice

INCOMPLETE = "Error: incomplete JSON object provided in request."


class TestListCompanies:
    def test_lists_code_and_name(self, client):
        resp = client.get("/companies/")
        assert resp.status_code == 200
        assert resp.json() == {"companies": [{"code": "apple", "name": "Apple"}]}

    def test_path_without_trailing_slash(self, client):
        resp = client.get("/companies")
        assert resp.status_code == 200
        assert resp.json()["companies"][0]["code"] == "apple"


class TestGetCompany:
    def test_includes_industries_in_insertion_order(self, client):
        resp = client.get("/companies/apple")
        assert resp.status_code == 200
        assert resp.json() == {
            "code": "apple",
            "name": "Apple",
            "description": "Maker of OSX",
            "industries": [{"industry_id": "tech"}, {"industry_id": "famous"}],
        }

    def test_omits_industries_when_none(self, client, db):
        db.add(Company(code="ibm", name="IBM", description="Big blue"))
        db.commit()

        resp = client.get("/companies/ibm")
        assert resp.status_code == 200
        assert resp.json() == {"code": "ibm", "name": "IBM", "description": "Big blue"}

    def test_unknown_code_returns_404(self, client):
        resp = client.get("/companies/something")
        assert resp.status_code == 404
        assert resp.json() == "Error: something can't be found."


class TestCreateCompany:
    def test_creates_company(self, client):
        resp = client.post(
            "/companies/",
            json={"code": "samsung", "name": "Samsung", "description": "Korean tech company"},
        )
        assert resp.status_code == 200
        assert resp.json() == {
            "company": {"code": "samsung", "name": "Samsung", "description": "Korean tech company"}
        }

    def test_code_is_slugified(self, client, db):
        resp = client.post(
            "/companies/",
            json={"code": "barnes & noble", "name": "Barnes & Noble", "description": "Book store"},
        )
        assert resp.status_code == 200
        assert resp.json() == {
            "company": {"code": "barnes-and-noble", "name": "Barnes & Noble", "description": "Book store"}
        }
        assert db.query(Company).filter(Company.code == "barnes-and-noble").count() == 1

    def test_partial_body_returns_400(self, client):
        resp = client.post("/companies/", json={"code": "samsung", "name": "Samsung"})
        assert resp.status_code == 400
        assert resp.json() == INCOMPLETE

    def test_empty_value_returns_400(self, client):
        resp = client.post(
            "/companies/", json={"code": "samsung", "name": "", "description": "Korean"}
        )
        assert resp.status_code == 400
        assert resp.json() == INCOMPLETE

    def test_no_body_returns_400(self, client):
        resp = client.post("/companies/")
        assert resp.status_code == 400
        assert resp.json() == INCOMPLETE

    def test_code_without_usable_characters_returns_400(self, client, db):
        for code in ("!!!", "   "):
            resp = client.post(
                "/companies/", json={"code": code, "name": "Bang", "description": "x"}
            )
            assert resp.status_code == 400
            assert resp.json() == INCOMPLETE

        assert [c.code for c in db.query(Company).all()] == ["apple"]

    def test_duplicate_code_returns_400(self, client, db):
        resp = client.post(
            "/companies/", json={"code": "Apple", "name": "Apple Again", "description": "Copy"}
        )
        assert resp.status_code == 400
        assert resp.json() == "Error: apple already exists."
        assert db.query(Company).count() == 1


class TestUpdateCompany:
    def test_updates_name_and_description(self, client):
        resp = client.put(
            "/companies/apple", json={"name": "Apple", "description": "Creator of iPhone"}
        )
        assert resp.status_code == 200
        assert resp.json() == {
            "company": {"code": "apple", "name": "Apple", "description": "Creator of iPhone"}
        }

    def test_code_is_immutable(self, client, db):
        resp = client.put(
            "/companies/apple",
            json={"code": "pear", "name": "Apple Inc", "description": "Creator of iPhone"},
        )
        assert resp.status_code == 200
        assert resp.json()["company"]["code"] == "apple"
        assert db.query(Company).filter(Company.code == "pear").first() is None

    def test_unknown_code_returns_404(self, client):
        resp = client.put("/companies/ibm", json={"name": "ibm", "description": "Creator of computers"})
        assert resp.status_code == 404
        assert resp.json() == (
            "Error: ibm could not be updated. Please provide valid JSON and a valid code."
        )

    def test_no_body_returns_404(self, client):
        resp = client.put("/companies/apple")
        assert resp.status_code == 404
        assert resp.json() == "Error: Please provide valid JSON and a valid code."

    def test_missing_description_returns_404(self, client):
        resp = client.put("/companies/apple", json={"name": "Apple"})
        assert resp.status_code == 404
        assert resp.json() == "Error: Please provide valid JSON and a valid code."


class TestDeleteCompany:
    def test_deletes_company(self, client, db):
        resp = client.delete("/companies/apple")
        assert resp.status_code == 200
        assert resp.json() == {"status": "deleted"}
        assert db.query(Company).count() == 0

    def test_removes_invoices_and_industry_links(self, client, db):
        client.delete("/companies/apple")
        assert db.query(Invoice).count() == 0
        assert db.query(CompanyIndustry).count() == 0

    def test_unknown_code_returns_404(self, client):
        resp = client.delete("/companies/ibm")
        assert resp.status_code == 404
        assert resp.json() == "Error: ibm can't be found"

    def test_second_delete_returns_404(self, client):
        assert client.delete("/companies/apple").status_code == 200
        resp = client.delete("/companies/apple")
        assert resp.status_code == 404
        assert resp.json() == "Error: apple can't be found"
