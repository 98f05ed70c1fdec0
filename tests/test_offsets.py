import asyncio

import httpx

from carbon_backend.services.offsets import FALLBACK_PROJECTS, OffsetRegistryService


def registry_with(handler):
    return OffsetRegistryService(
        base_url="https://registry.test/",
        limit=5,
        transport=httpx.MockTransport(handler),
    )


def test_lists_active_projects_from_registry():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(
            200,
            json=[{"id": "GS-1", "name": "Cookstoves", "location": "Kenya", "sdgs": [3, 13]}],
        )

    projects = asyncio.run(registry_with(handler).list_projects())

    assert seen == {"path": "/projects", "params": {"limit": "5", "status": "active"}}
    assert [p.name for p in projects] == ["Cookstoves"]
    assert projects[0].model_dump()["sdgs"] == [3, 13]


def test_unwraps_enveloped_project_list():
    handler = lambda r: httpx.Response(200, json={"projects": [{"id": 7, "name": "Wind"}]})
    projects = asyncio.run(registry_with(handler).list_projects())
    assert projects[0].id == 7


def test_unreachable_registry_serves_static_projects():
    def handler(request):
        raise httpx.ConnectTimeout("slow", request=request)

    projects = asyncio.run(registry_with(handler).list_projects())
    assert projects == FALLBACK_PROJECTS


def test_error_status_or_bad_payload_serves_static_projects():
    for response in (
        httpx.Response(403, json={"detail": "auth required"}),
        httpx.Response(200, text="<html>"),
        httpx.Response(200, json={"unexpected": "shape"}),
        httpx.Response(200, json=[{"title": "no id or name"}]),
    ):
        projects = asyncio.run(registry_with(lambda r, resp=response: resp).list_projects())
        assert [p.name for p in projects] == [
            "Renewable Energy Project",
            "Reforestation Program",
        ]
