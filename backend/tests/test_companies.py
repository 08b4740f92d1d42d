class TestCompanies:
    def test_list_all(self, client):
        r = client.get("/companies")
        assert r.status_code == 200
        assert [c["handle"] for c in r.json()["companies"]] == ["c1", "c2", "c3"]

    def test_filter_by_employees(self, client):
        r = client.get("/companies?minEmployees=2&maxEmployees=3")
        assert [c["handle"] for c in r.json()["companies"]] == ["c2", "c3"]

    def test_filter_by_name(self, client):
        r = client.get("/companies?name=c3")
        companies = r.json()["companies"]
        assert len(companies) == 1
        assert companies[0]["logoUrl"] is None

    def test_min_greater_than_max(self, client):
        r = client.get("/companies?minEmployees=100&maxEmployees=10")
        assert r.status_code == 400

    def test_unknown_filter(self, client):
        r = client.get("/companies?foo=bar")
        assert r.status_code == 400

    def test_get_with_jobs(self, client):
        r = client.get("/companies/c1")
        assert r.status_code == 200
        company = r.json()["company"]
        assert company["name"] == "C1"
        assert sorted(j["title"] for j in company["jobs"]) == ["Job1", "Job2", "Job3", "Job4"]

    def test_get_not_found(self, client):
        r = client.get("/companies/nope")
        assert r.status_code == 404
        assert r.json()["error"]["message"] == "No company: nope"


class TestHealth:
    def test_health(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"
