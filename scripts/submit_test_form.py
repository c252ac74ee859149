import asyncio, sys, json
import httpx

async def main():
    if len(sys.argv) < 3:
        print("Usage: python scripts/submit_test_form.py <post_id> <form_guid> [base_url]")
        raise SystemExit(1)
    post_id, form_guid = sys.argv[1], sys.argv[2]
    base_url = sys.argv[3] if len(sys.argv) > 3 else "http://localhost:8099"
    body = {
        "fields": {
            "post_id": {"id": "post_id", "value": post_id},
            "email": {"id": "email", "value": "test@example.com"},
            "firstname": {"id": "firstname", "value": "Test"},
        },
        "form_settings": {
            "hubspot_access_token": "set",
            "hubspot_portalid": "set",
            "use_dropdown": "",
            "hubspot_formid_dynamic": form_guid,
        },
    }
    async with httpx.AsyncClient(timeout=120) as client:
        r = await client.post(f"{base_url}/forms/hubspot/submit", json=body)
        print(r.status_code)
        print(json.dumps(r.json(), indent=2))

if __name__ == "__main__":
    asyncio.run(main())
