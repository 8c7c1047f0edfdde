#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify the database and external services are configured.
Usage: python scripts/check_connections.py
"""
import asyncio
import sys
sys.path.insert(0, '.')

from sqlalchemy.engine import make_url

from internship_api.core.config import get_settings
from internship_api.db.postgres import test_postgres_connection
from internship_api.services.language_service import get_skill_analysis_service


async def main():
    settings = get_settings()
    print("=" * 50)
    print("INTERNSHIP TRACKER - CONNECTION CHECK")
    print("=" * 50)

    # PostgreSQL
    print("\n[1] Testing PostgreSQL...")
    print(f"    URL: {make_url(settings.postgres_url).render_as_string(hide_password=True)}")
    if await test_postgres_connection():
        print("    ✅ PostgreSQL: CONNECTED")
    else:
        print("    ❌ PostgreSQL: FAILED")

    # Blob storage (config only, no upload)
    print("\n[2] Checking Azure Blob Storage...")
    if settings.azure_storage_connection_string:
        print(f"    Container: {settings.resume_container}, SAS lifetime: {settings.sas_expiry_seconds}s")
        print("    ✅ Blob Storage: CONFIGURED")
    else:
        print("    ⚠️  Blob Storage: connection string not configured")

    # Language service
    print("\n[3] Testing Azure AI Language...")
    if settings.azure_language_endpoint and settings.azure_language_key:
        try:
            phrases = await get_skill_analysis_service().extract_key_phrases("Python and SQL developer")
            print(f"    ✅ Language: CONNECTED ({', '.join(phrases)})")
        except Exception as e:
            print(f"    ❌ Language: FAILED ({e})")
    else:
        print("    ⚠️  Language: endpoint/key not configured (skip for now)")

    # LLM
    print("\n[4] Checking OpenAI...")
    if settings.openai_api_key:
        print(f"    Model: {settings.openai_model}")
        print("    ✅ OpenAI: CONFIGURED")
    else:
        print("    ⚠️  OpenAI: API key not configured (skip for now)")

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)


if __name__ == "__main__":
    asyncio.run(main())
