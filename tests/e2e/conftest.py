"""
Pytest fixtures for Playwright E2E tests.

This module provides fixtures for the browser session, page objects, the
charge point API client and per-test loggers. E2E tests are skipped when
the application under test is not reachable.
"""

import re
from typing import AsyncGenerator

import pytest
import pytest_asyncio
import requests
from playwright.async_api import (
    async_playwright,
    APIRequestContext,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from chargepoint_e2e import ApiClient, E2ESettings, get_settings
from chargepoint_e2e.config import BrowserConfig
from chargepoint_e2e.logger import TestLogger, configure_logging, get_test_logger

from .pages import ChargePointsPage, HomePage


# =============================================================================
# Configuration
# =============================================================================

@pytest.fixture(scope="session")
def settings() -> E2ESettings:
    """Suite settings, with the diagnostic logger configured from them."""
    settings = get_settings()
    configure_logging(settings.logging)
    return settings


def _probe(url: str, timeout: float) -> None:
    """Skip the requesting test if nothing answers at ``url``."""
    try:
        requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        pytest.skip(f"Application not reachable at {url}: {e}")


@pytest.fixture(scope="session")
def api_available(settings: E2ESettings) -> str:
    """Base URL of the API, once it has answered a request."""
    _probe(f"{settings.api_url}/charge-point", settings.probe_timeout)
    return settings.api_url


@pytest.fixture(scope="session")
def ui_available(settings: E2ESettings) -> str:
    """Base URL of the UI, once it has answered a request."""
    _probe(settings.base_url, settings.probe_timeout)
    return settings.base_url


# =============================================================================
# Playwright Fixtures
# =============================================================================

@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def playwright() -> AsyncGenerator[Playwright, None]:
    """Create a Playwright instance for the test session."""
    async with async_playwright() as pw:
        yield pw


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser(
    playwright: Playwright, settings: E2ESettings, ui_available: str
) -> AsyncGenerator[Browser, None]:
    """Launch Chromium for the test session."""
    config = BrowserConfig.from_settings(settings)
    browser = await playwright.chromium.launch(**config.to_launch_options())
    yield browser
    await browser.close()


@pytest_asyncio.fixture(loop_scope="session")
async def context(
    browser: Browser, settings: E2ESettings
) -> AsyncGenerator[BrowserContext, None]:
    """
    Create a new browser context for each test.

    This provides isolation between tests with separate cookies,
    storage, and other browser state.
    """
    config = BrowserConfig.from_settings(settings)
    context = await browser.new_context(**config.to_context_options())
    context.set_default_timeout(settings.timeout)

    yield context
    await context.close()


@pytest_asyncio.fixture(loop_scope="session")
async def page(
    request: pytest.FixtureRequest,
    context: BrowserContext,
    settings: E2ESettings,
) -> AsyncGenerator[Page, None]:
    """Create a page for each test, saving a screenshot if the test fails."""
    page = await context.new_page()
    page.set_default_navigation_timeout(settings.timeout)
    page.set_default_timeout(settings.timeout)

    yield page

    report = getattr(request.node, "rep_call", None)
    if settings.screenshot_on_failure and report is not None and report.failed:
        settings.screenshots_dir.mkdir(parents=True, exist_ok=True)
        safe_name = re.sub(r"[^\w-]", "_", request.node.name)
        await page.screenshot(
            path=str(settings.screenshots_dir / f"{safe_name}.png"),
            full_page=True,
        )
    await page.close()


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Hook to store test result for the screenshot-on-failure teardown."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)


# =============================================================================
# API Client Fixtures
# =============================================================================

@pytest_asyncio.fixture(loop_scope="session")
async def api_request_context(
    playwright: Playwright, settings: E2ESettings, api_available: str
) -> AsyncGenerator[APIRequestContext, None]:
    """Playwright request context for direct API calls."""
    request_context = await playwright.request.new_context(
        timeout=settings.timeout,
    )
    yield request_context
    await request_context.dispose()


@pytest_asyncio.fixture(loop_scope="session")
async def api_client(
    api_request_context: APIRequestContext, settings: E2ESettings
) -> ApiClient:
    """Create an API client for the charge point resource."""
    return ApiClient(api_request_context, settings.api_url)


# =============================================================================
# Page Object Fixtures
# =============================================================================

@pytest_asyncio.fixture(loop_scope="session")
async def charge_points_page(
    page: Page, settings: E2ESettings
) -> ChargePointsPage:
    """Create a ChargePointsPage already navigated to the list."""
    charge_points_page = ChargePointsPage(
        page, settings.base_url, settings.expect_timeout
    )
    await charge_points_page.navigate()
    return charge_points_page


@pytest_asyncio.fixture(loop_scope="session")
async def home_page(page: Page, settings: E2ESettings) -> HomePage:
    """Create a HomePage instance."""
    return HomePage(page, settings.base_url, settings.expect_timeout)


# =============================================================================
# Logging Fixtures
# =============================================================================

@pytest.fixture
def test_logger(request: pytest.FixtureRequest, settings: E2ESettings):
    """Logger tagged with the running test's name."""
    logger: TestLogger = get_test_logger(request.node.name)
    logger.info("Starting test")
    yield logger
    logger.info("Test completed")
