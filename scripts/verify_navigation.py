"""Browser smoke check against a running instance.

Run with:
  streamlit run app.py &
  python scripts/verify_navigation.py
"""
import os
import time

from playwright.sync_api import sync_playwright, expect

BASE_URL = os.environ.get("SITE_URL", "http://localhost:8501")
SHOTS = os.environ.get("SCREENSHOT_DIR", "verification")


def run_verification():
    os.makedirs(SHOTS, exist_ok=True)
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=True)
        page = browser.new_page()

        time.sleep(5)  # Wait for streamlit to start
        page.goto(BASE_URL)
        page.wait_for_selector("text='Team Coaching that Turns Potential into Performance'")
        page.screenshot(path=f"{SHOTS}/01_home.png")

        # 1. Header navigation swaps only the page region
        page.get_by_role("button", name="Teams vs Groups").click()
        expect(page.get_by_text("Primary Purpose")).to_be_visible()
        expect(page.get_by_text("Melissa Pagar Team Coaching").first).to_be_visible()
        page.screenshot(path=f"{SHOTS}/02_compare.png")

        # 2. Hero button navigates to the sample session
        page.get_by_role("button", name="See a Sample Session").click()
        expect(page.get_by_text("Example 90‑Minute Session")).to_be_visible()

        # 3. Missing required fields show the inline error
        page.get_by_role("button", name="Send Message").click()
        expect(page.get_by_text("Please complete required fields or try again.")).to_be_visible()

        # 4. Valid submission succeeds and clears the form
        page.get_by_label("Name*").fill("Jane")
        page.get_by_label("Email*").fill("jane@x.com")
        page.get_by_label("Message*").fill("Hi")
        page.get_by_role("button", name="Send Message").click()
        expect(page.get_by_text("Thanks! I’ll reply shortly.")).to_be_visible()
        expect(page.get_by_label("Name*")).to_have_value("")
        page.screenshot(path=f"{SHOTS}/03_contact_success.png")

        browser.close()


if __name__ == "__main__":
    run_verification()
