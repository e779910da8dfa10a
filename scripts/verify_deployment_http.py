#!/usr/bin/env python3
"""
Black Box Verification Script for a Live Deployment.

This script sends a sample transcript to a running analyzer and checks the
page, the validation path and the response shape of POST /api/analyze.

Usage:
    python scripts/verify_deployment_http.py <BASE_URL>
    
Example:
    python scripts/verify_deployment_http.py http://localhost:8000
"""
import asyncio
import sys
from datetime import datetime

import httpx

SAMPLE_TRANSCRIPT = """Alice: Thanks everyone. Bob, can you send the revised budget by Friday?
Bob: Sure, I'll send it Thursday.
Alice: Great. I'll book the room for the client demo.
Carol: Someone should update the onboarding docs before the release."""


def log(message: str):
    """Log with timestamp."""
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{timestamp}] {message}")


async def main():
    if len(sys.argv) < 2:
        print("Usage: python scripts/verify_deployment_http.py <BASE_URL>")
        print("Example: python scripts/verify_deployment_http.py http://localhost:8000")
        sys.exit(1)
    
    base_url = sys.argv[1].rstrip("/")
    failures = 0
    
    async with httpx.AsyncClient(base_url=base_url, timeout=120.0) as client:
        # Step 1: Page is served
        log(f"GET {base_url}/")
        response = await client.get("/")
        if response.status_code == 200 and "Meeting Transcript Analyzer" in response.text:
            log("✓ Page served")
        else:
            log(f"✗ Page check failed: status={response.status_code}")
            failures += 1
        
        # Step 2: Validation rejects a missing transcript
        response = await client.post("/api/analyze", json={})
        if response.status_code == 400 and "error" in response.json():
            log(f"✓ Validation: {response.json()['error']}")
        else:
            log(f"✗ Expected 400, got {response.status_code}: {response.text}")
            failures += 1
        
        # Step 3: Real extraction
        log("POST /api/analyze with sample transcript...")
        response = await client.post("/api/analyze", json={"transcript": SAMPLE_TRANSCRIPT})
        body = response.json()
        if response.status_code == 200 and isinstance(body.get("actions"), list):
            log(f"✓ Extracted {len(body['actions'])} action items")
            for action in body["actions"]:
                log(f"    {action.get('owner') or 'Unassigned'}: {action.get('task')}")
        else:
            log(f"✗ Analysis failed: status={response.status_code}, body={body}")
            failures += 1
    
    if failures:
        log(f"VERIFICATION FAILED ({failures} checks)")
        sys.exit(1)
    log("VERIFICATION PASSED")


if __name__ == "__main__":
    asyncio.run(main())
