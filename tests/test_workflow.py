"""
End-to-end runs of the step engine against a cooperative fake portal.

No browser is involved: the fake page reacts to clicks, navigations and
file uploads the way the real profile page does.
"""

from __future__ import annotations

import pytest

from resumerefresh import config
from resumerefresh.core.types import (
    Click,
    Credentials,
    ElementContainsAllOf,
    ElementVisible,
    FailureCause,
    LocatorSpec,
    Navigate,
    RunContext,
    SetUploadFile,
    URLMatches,
    WorkflowStep,
    css,
    role,
    xpath,
)
from resumerefresh.engine.executor import StepExecutor
from resumerefresh.engine.resolver import LocatorResolver
from resumerefresh.inputs.resume import resume_locator
from resumerefresh.workflows.naukri import STEPS
from tests.fakes import FakeElement, FakePage

HOMEPAGE = "https://www.naukri.com/mnjuser/homepage"
HEADLINE_NOTE = "Success\nResume Headline has been successfully saved."
UPLOAD_NOTE = "Success\nResume has been successfully uploaded."

EDIT = LocatorSpec(
    "edit",
    (
        css(".resumeHeadline .edit", first_only=True),
        xpath('//span[text()="Resume Headline"]/following-sibling::span', first_only=True),
    ),
)
SAVE = LocatorSpec("save button", (role("button", "Save", first_only=True),))
NOTIFICATION = LocatorSpec("notification", (css(".msgBox.success", first_only=True),))
UPLOAD = LocatorSpec(
    "upload trigger", (css('input[type="button"][value="Update resume"]', first_only=True),)
)


def scenario_steps(resume_path: str, timeout_ms: float = 200) -> tuple[WorkflowStep, ...]:
    return (
        WorkflowStep(
            "Navigate(login)",
            Navigate(config.LOGIN_URL, wait_until="networkidle"),
            postcondition=URLMatches(config.HOMEPAGE_URL_PATTERN),
            timeout_ms=timeout_ms,
        ),
        WorkflowStep(
            "Navigate(profile)",
            Navigate(config.PROFILE_URL, wait_until="domcontentloaded"),
            postcondition=URLMatches(config.PROFILE_URL_PATTERN),
            timeout_ms=timeout_ms,
        ),
        WorkflowStep(
            "Click(edit)",
            Click(),
            locator=EDIT,
            postcondition=ElementVisible(SAVE),
            timeout_ms=timeout_ms,
        ),
        WorkflowStep(
            "Click(save)",
            Click(),
            locator=SAVE,
            postcondition=ElementContainsAllOf(
                NOTIFICATION, ("Success", "Resume Headline has been successfully saved.")
            ),
            timeout_ms=timeout_ms,
        ),
        WorkflowStep(
            "Click(uploadTrigger)",
            SetUploadFile(resume_path),
            locator=UPLOAD,
            postcondition=ElementContainsAllOf(
                NOTIFICATION, ("Resume has been successfully uploaded.",)
            ),
            timeout_ms=timeout_ms,
        ),
    )


def cooperative_portal(*, login_redirects: bool = True, editor_opens: bool = True) -> FakePage:
    page = FakePage()
    page.routes = {
        config.LOGIN_URL: HOMEPAGE if login_redirects else config.LOGIN_URL,
        config.PROFILE_URL: config.PROFILE_URL,
    }

    # Login form
    page.add(("locator", 'input[placeholder*="Username"]'), FakeElement())
    page.add(("locator", 'input[placeholder*="Password"]'), FakeElement())

    def submit_login():
        page.url = HOMEPAGE

    page.add(("locator", 'button[type="submit"]'), FakeElement("Login", on_click=submit_login))

    # Headline editor
    save = FakeElement("Save", visible=False)

    def open_editor():
        save.visible = editor_opens

    def save_headline():
        page.add(("locator", ".msgBox.success"), FakeElement(HEADLINE_NOTE))

    save.on_click = save_headline
    page.add(("role", "button", "Save"), save)
    page.add(("locator", ".resumeHeadline .edit"), FakeElement(on_click=open_editor))

    # Resume upload
    page.add(
        ("locator", 'input[type="button"][value="Update resume"]'),
        FakeElement(opens_chooser=True),
    )
    page.on_upload = lambda files: page.add(("locator", ".msgBox.success"), FakeElement(UPLOAD_NOTE))
    return page


def make_executor() -> StepExecutor:
    return StepExecutor(resolver=LocatorResolver(poll_interval=0.01))


def make_context(page, **kwargs) -> RunContext:
    kwargs.setdefault("diagnostics_path", "error.png")
    return RunContext(page=page, credentials=Credentials("alice", "pw"), **kwargs)


class TestScenario:
    @pytest.mark.asyncio
    async def test_cooperative_target_succeeds(self, tmp_path):
        resume = tmp_path / "resume.pdf"
        resume.write_bytes(b"%PDF-1.4")
        page = cooperative_portal()

        result = await make_executor().run(scenario_steps(str(resume)), make_context(page))

        assert result.succeeded, result.summary()
        assert [r.name for r in result.step_results] == [
            "Navigate(login)",
            "Navigate(profile)",
            "Click(edit)",
            "Click(save)",
            "Click(uploadTrigger)",
        ]
        assert page.navigations == [
            (config.LOGIN_URL, "networkidle"),
            (config.PROFILE_URL, "domcontentloaded"),
        ]
        assert page.uploaded == [str(resume)]
        assert page.screenshots == []

    @pytest.mark.asyncio
    async def test_missing_save_button_fails_edit_step(self, tmp_path):
        resume = tmp_path / "resume.pdf"
        resume.write_bytes(b"%PDF-1.4")
        page = cooperative_portal(editor_opens=False)

        result = await make_executor().run(scenario_steps(str(resume), 50), make_context(page))

        assert result.succeeded is False
        assert result.failed_step == "Click(edit)"
        assert result.cause == FailureCause.ELEMENT_NOT_FOUND
        assert result.steps_executed == 3
        assert page.uploaded == []
        assert len(page.screenshots) == 1

    @pytest.mark.asyncio
    async def test_login_that_does_not_redirect_times_out(self, tmp_path):
        page = cooperative_portal(login_redirects=False)
        result = await make_executor().run(scenario_steps(str(tmp_path / "x.pdf"), 30), make_context(page))
        assert result.failed_step == "Navigate(login)"
        assert result.cause == FailureCause.POSTCONDITION_TIMEOUT
        assert result.steps_executed == 1

    @pytest.mark.asyncio
    async def test_headline_notification_does_not_complete_upload(self, tmp_path):
        resume = tmp_path / "resume.pdf"
        resume.write_bytes(b"%PDF-1.4")
        page = cooperative_portal()
        page.on_upload = None  # upload goes through but no confirmation appears

        result = await make_executor().run(scenario_steps(str(resume), 50), make_context(page))

        assert result.failed_step == "Click(uploadTrigger)"
        assert result.cause == FailureCause.POSTCONDITION_TIMEOUT


class TestNaukriWorkflow:
    @pytest.mark.asyncio
    async def test_full_workflow_against_cooperative_portal(self, tmp_path):
        (tmp_path / "notes.txt").write_text("ignored")
        (tmp_path / "cv.docx").write_bytes(b"docx")
        page = cooperative_portal()
        page.routes[config.LOGIN_URL] = config.LOGIN_URL

        context = make_context(page, resume_locator=resume_locator(tmp_path))
        result = await make_executor().run(STEPS, context)

        assert result.succeeded, result.summary()
        assert result.steps_executed == len(STEPS)
        username_field = page.dom[("locator", 'input[placeholder*="Username"]')][0]
        password_field = page.dom[("locator", 'input[placeholder*="Password"]')][0]
        assert username_field.filled == ["alice"]
        assert password_field.filled == ["pw"]
        assert page.uploaded == [str(tmp_path / "cv.docx")]

    @pytest.mark.asyncio
    async def test_no_resume_fails_at_upload_after_headline_saved(self, tmp_path):
        page = cooperative_portal()
        page.routes[config.LOGIN_URL] = config.LOGIN_URL

        context = make_context(page, resume_locator=resume_locator(tmp_path))
        result = await make_executor().run(STEPS, context)

        assert result.failed_step == "upload resume"
        assert result.cause == FailureCause.PRECONDITION
        assert result.steps_executed == len(STEPS)
        assert all(r.success for r in result.step_results[:-1])
        assert page.screenshots == []

    def test_steps_are_immutable_and_ordered(self):
        names = [s.name for s in STEPS]
        assert names[0] == "open login page"
        assert names[-1] == "upload resume"
        assert len(set(names)) == len(names)
        assert isinstance(STEPS, tuple)

    def test_notification_texts_differ_per_step(self):
        save_texts = STEPS[-2].postcondition.texts
        upload_texts = STEPS[-1].postcondition.texts
        assert not set(upload_texts) <= set(save_texts)
