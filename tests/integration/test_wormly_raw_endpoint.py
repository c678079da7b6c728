class TestWormlyRawEndpoint:
    async def test_passthrough(self, client, fake_wormly):
        response = await client.get("/api/wormly-raw")
        assert response.status_code == 200
        data = response.json()
        assert data["wormly_response"] == fake_wormly.payload
        assert data["mapped_services"] == 8
        assert data["url_used"] == "http://fake-wormly/?key=HIDDEN&response=json&cmd=getHostStatus"
        assert "test-key" not in data["url_used"]
        assert data["available_hostids"] == [
            "107401: Coroners API",
            "68843: NBC Collection Details",
            "555555: Unmapped staging box",
            "89703: Blue Badge",
        ]

    async def test_does_not_validate_errorcode(self, client, fake_wormly):
        fake_wormly.payload = {"errorcode": 3}
        response = await client.get("/api/wormly-raw")
        assert response.status_code == 200
        data = response.json()
        assert data["wormly_response"] == {"errorcode": 3}
        assert data["available_hostids"] == []

    async def test_missing_api_key(self, client, wormly_client, fake_wormly):
        wormly_client.api_key = None
        response = await client.get("/api/wormly-raw")
        assert response.status_code == 500
        assert response.json() == {"error": "WORMLY_API_KEY not configured"}
        assert fake_wormly.requests == []

    async def test_upstream_failure(self, client, fake_wormly):
        fake_wormly.status_code = 500
        response = await client.get("/api/wormly-raw")
        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "Failed to fetch Wormly data"
        assert "message" in data
