"""
Naukri profile refresh: log in, re-save the resume headline, upload a resume.

Each UI target lists a few alternative strategies, most specific first, so
small markup changes on the portal do not break the run.
"""

from __future__ import annotations

from resumerefresh import config
from resumerefresh.core.types import (
    Click,
    ElementContainsAllOf,
    ElementVisible,
    Fill,
    LocatorSpec,
    Navigate,
    SetUploadFile,
    URLMatches,
    WorkflowStep,
    css,
    placeholder,
    role,
    xpath,
)

USERNAME_FIELD = LocatorSpec(
    "username field",
    (
        css('input[placeholder*="Username"]'),
        placeholder("Email ID / Username"),
        css("#usernameField"),
    ),
)

PASSWORD_FIELD = LocatorSpec(
    "password field",
    (
        css('input[placeholder*="Password"]'),
        css('input[type="password"]'),
        css("#passwordField"),
    ),
)

LOGIN_BUTTON = LocatorSpec(
    "login button",
    (
        css('button[type="submit"]', first_only=True),
        role("button", "Login", first_only=True),
    ),
)

HEADLINE_EDIT = LocatorSpec(
    "resume headline edit control",
    (
        css(".resumeHeadline .edit", first_only=True),
        css('.widgetTitle:has-text("Resume Headline") ~ .edit', first_only=True),
        xpath(
            '//span[text()="Resume Headline"]/following-sibling::span[contains(@class, "edit")]',
            first_only=True,
        ),
    ),
)

SAVE_BUTTON = LocatorSpec(
    "save button",
    (
        role("button", "Save", first_only=True),
        css('button[type="submit"]:has-text("Save")', first_only=True),
    ),
)

SUCCESS_NOTIFICATION = LocatorSpec(
    "success notification",
    (css(".msgBox.success", first_only=True),),
)

UPDATE_RESUME_BUTTON = LocatorSpec(
    "update resume button",
    (
        css('input[type="button"][value="Update resume"]', first_only=True),
        css('input.dummyUpload[value="Update resume"]', first_only=True),
        role("button", "Update resume", first_only=True),
    ),
)

STEPS: tuple[WorkflowStep, ...] = (
    WorkflowStep(
        name="open login page",
        action=Navigate(config.LOGIN_URL, wait_until="networkidle"),
        timeout_ms=config.NAVIGATION_TIMEOUT_MS,
    ),
    WorkflowStep(
        name="enter username",
        action=Fill(secret="username"),
        locator=USERNAME_FIELD,
        timeout_ms=config.ELEMENT_TIMEOUT_MS,
    ),
    WorkflowStep(
        name="enter password",
        action=Fill(secret="password"),
        locator=PASSWORD_FIELD,
        timeout_ms=config.ELEMENT_TIMEOUT_MS,
    ),
    WorkflowStep(
        name="submit login",
        action=Click(),
        locator=LOGIN_BUTTON,
        postcondition=URLMatches(
            config.HOMEPAGE_URL_PATTERN, timeout_ms=config.LOGIN_REDIRECT_TIMEOUT_MS
        ),
        timeout_ms=config.ELEMENT_TIMEOUT_MS,
    ),
    WorkflowStep(
        name="open profile page",
        action=Navigate(config.PROFILE_URL, wait_until="domcontentloaded"),
        postcondition=URLMatches(config.PROFILE_URL_PATTERN),
        timeout_ms=config.NAVIGATION_TIMEOUT_MS,
    ),
    WorkflowStep(
        name="edit resume headline",
        action=Click(),
        locator=HEADLINE_EDIT,
        postcondition=ElementVisible(SAVE_BUTTON),
        timeout_ms=config.ELEMENT_TIMEOUT_MS,
    ),
    WorkflowStep(
        name="save resume headline",
        action=Click(),
        locator=SAVE_BUTTON,
        postcondition=ElementContainsAllOf(
            SUCCESS_NOTIFICATION,
            (config.SUCCESS_STATUS_TEXT, config.HEADLINE_SAVED_TEXT),
            timeout_ms=config.HEADLINE_NOTIFICATION_TIMEOUT_MS,
        ),
        timeout_ms=config.ELEMENT_TIMEOUT_MS,
    ),
    WorkflowStep(
        name="upload resume",
        action=SetUploadFile(),
        locator=UPDATE_RESUME_BUTTON,
        postcondition=ElementContainsAllOf(
            SUCCESS_NOTIFICATION,
            (config.RESUME_UPLOADED_TEXT,),
            timeout_ms=config.UPLOAD_NOTIFICATION_TIMEOUT_MS,
        ),
        timeout_ms=config.ELEMENT_TIMEOUT_MS,
    ),
)
