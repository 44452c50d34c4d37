"""
Playwright E2E check - test tab navigation.
Clicks through every test tab and confirms each renders its charts
without a Streamlit exception.

Start the dashboard first:
    python scripts/create_sample_data.py
    streamlit run dashboard/camogie_dashboard.py --server.port 8501
"""
import asyncio
import sys

from playwright.async_api import async_playwright

BASE_URL = "http://localhost:8501"

TABS = ['CMJ', 'CMRJ', 'Hop Test', 'Hip Strength', 'Hamstring']

# Charts drawn per tab
EXPECTED_CHARTS = {
    'CMJ': 4,
    'CMRJ': 5,
    'Hop Test': 1,
    'Hip Strength': 4,
    'Hamstring': 4,
}


async def check_dashboard_tabs(headless: bool = True) -> bool:
    """Return True when every tab shows its charts and no exception."""
    failures = []

    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=headless, slow_mo=250)
        page = await browser.new_page()

        print("\n=== Dashboard Tab Test ===\n")

        print("1. Loading dashboard...")
        await page.goto(BASE_URL, wait_until="networkidle", timeout=60000)
        await page.wait_for_timeout(3000)

        header = page.locator("text=Down GAA Senior Camogie")
        if await header.count() == 0:
            failures.append("header missing")

        for i, label in enumerate(TABS, start=2):
            print(f"{i}. Opening {label} tab...")
            tab = page.locator(f"button[role='tab']:has-text('{label}')")
            if await tab.count() == 0:
                failures.append(f"{label}: tab not found")
                continue

            await tab.first.click()
            await page.wait_for_timeout(2000)

            panel = page.locator("[role='tabpanel']:visible")
            charts = await panel.locator(".js-plotly-plot").count()
            print(f"   {charts} charts")
            if charts < EXPECTED_CHARTS[label]:
                failures.append(f"{label}: expected {EXPECTED_CHARTS[label]} charts, found {charts}")

            if await page.locator("[data-testid='stException']").count() > 0:
                failures.append(f"{label}: exception shown")

        await browser.close()

    print("\n=== Test Complete ===")
    for failure in failures:
        print(f"   FAIL: {failure}")
    if not failures:
        print("   SUCCESS: all tabs rendered")

    return not failures


if __name__ == "__main__":
    print(f"Dashboard should be running on {BASE_URL}")
    ok = asyncio.run(check_dashboard_tabs(headless='--headed' not in sys.argv))
    sys.exit(0 if ok else 1)
