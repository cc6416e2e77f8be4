"""Natural-language employee intake.

Turns one free-text prompt into zero or more provisioned employees. Each
extracted person gets an employee record and a linked login account created
in a single transaction, then a welcome email carrying a one-time password.
Records are processed one at a time in the order the model returned them.
"""

import logging
from datetime import date, datetime

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hrms_api.config import Settings, get_settings
from hrms_api.exceptions import (
    AccountNotLinkedError,
    EmailDeliveryError,
    EmployeeNotFoundError,
    ExtractionServiceUnavailableError,
    MissingPromptError,
)
from hrms_api.models.domain.employee import EmployeeStatus
from hrms_api.models.domain.user import UserRole
from hrms_api.models.dto.intake import (
    ExtractedEmployee,
    IntakeOutcome,
    IntakeReport,
    IntakeStatus,
    IntakeSummary,
    ProcessedEmployee,
    ResendWelcomeResponse,
)
from hrms_api.providers.base import TextGenerationProvider
from hrms_api.repositories.employee_repository import EmployeeRepository
from hrms_api.repositories.user_repository import UserRepository
from hrms_api.security.password import PasswordService, get_password_service
from hrms_api.services.email_service import EmailService
from hrms_api.services.intake_prompts import build_extraction_prompt
from hrms_api.utils.json_extraction import parse_employee_array
from hrms_api.utils.secure_logging import log_warning, mask_email, sanitize_exception_message

logger = logging.getLogger(__name__)


class EmployeeIntakeService:
    """Service for AI-assisted employee intake."""

    def __init__(
        self,
        session: AsyncSession,
        provider: TextGenerationProvider | None,
        email_service: EmailService,
        password_service: PasswordService | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize service with its collaborators.

        Args:
            session: Database session; committed once per provisioned record
            provider: Text generation provider, or None when not configured
            email_service: Mail transport for credential delivery
            password_service: Password hashing/generation
            settings: Application settings
        """
        self.session = session
        self.provider = provider
        self.email_service = email_service
        self.password_service = password_service or get_password_service()
        self.settings = settings or get_settings()
        self.employee_repo = EmployeeRepository(session)
        self.user_repo = UserRepository(session)

    async def intake(self, prompt: str | None, actor_id: int | None = None) -> IntakeReport:
        """Extract employees from ``prompt`` and provision each of them.

        Args:
            prompt: Free-text description of one or more new hires
            actor_id: Employee id of the caller, recorded as ``created_by``

        Returns:
            IntakeReport with one entry per extracted element, in order

        Raises:
            MissingPromptError: If the prompt is missing or blank
            ExtractionServiceUnavailableError: If no provider is configured
            ExtractionError: If the model reply cannot be obtained or parsed
        """
        if not prompt or not prompt.strip():
            raise MissingPromptError()

        if self.provider is None:
            raise ExtractionServiceUnavailableError()

        instruction = build_extraction_prompt(prompt, date.today())
        raw_reply = await self.provider.generate(instruction)
        elements = parse_employee_array(raw_reply)

        logger.info("Intake extracted %d employee record(s)", len(elements))

        processed: list[ProcessedEmployee] = []
        summary = IntakeSummary()

        for raw in elements:
            outcome = await self._provision_element(raw, actor_id)
            processed.append(ProcessedEmployee.from_raw(raw, outcome))

            summary.total_processed += 1
            if outcome.provisioned:
                summary.successful_creations += 1
            if outcome.email_sent:
                summary.emails_sent += 1
            if outcome.status == IntakeStatus.SKIPPED:
                summary.skipped += 1
            elif outcome.status == IntakeStatus.ERROR:
                summary.errors += 1

        logger.info(
            "Intake finished: %d processed, %d created, %d emailed, %d skipped, %d errors",
            summary.total_processed,
            summary.successful_creations,
            summary.emails_sent,
            summary.skipped,
            summary.errors,
        )

        return IntakeReport(summary=summary, processed_employees=processed)

    async def _provision_element(self, raw: object, actor_id: int | None) -> IntakeOutcome:
        """Validate one raw model element, then provision it."""
        try:
            extracted = ExtractedEmployee.model_validate(raw)
        except PydanticValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
            logger.warning("Intake skipped a malformed element (fields: %s)", fields)
            return IntakeOutcome(
                status=IntakeStatus.ERROR,
                message="Invalid employee data: "
                + (f"missing or invalid fields {', '.join(fields)}" if fields else "expected an object"),
            )
        return await self.provision(extracted, actor_id)

    async def provision(self, extracted: ExtractedEmployee, actor_id: int | None = None) -> IntakeOutcome:
        """Create the employee and account for one extracted person.

        Args:
            extracted: Validated model output for one person
            actor_id: Creating actor's employee id (system actor if None)

        Returns:
            IntakeOutcome describing what happened
        """
        email = extracted.email.strip().lower()

        existing_employee = await self.employee_repo.get_by_email(email)
        if existing_employee:
            logger.info("Intake skipped existing employee %s", mask_email(email))
            return IntakeOutcome(
                status=IntakeStatus.SKIPPED,
                message=f"Employee with email {email} already exists.",
                employee_id=existing_employee.id,
            )

        existing_account = await self.user_repo.get_by_email(email)
        if existing_account:
            # Needs manual intervention; never linked or overwritten here
            logger.warning("Intake found an account without employee for %s", mask_email(email))
            return IntakeOutcome(
                status=IntakeStatus.ERROR,
                message=f"A user account with email {email} already exists "
                "without an employee record.",
                user_id=existing_account.id,
            )

        try:
            joining_date = datetime.strptime(extracted.start_date.strip(), "%Y-%m-%d").date()
        except ValueError:
            return IntakeOutcome(
                status=IntakeStatus.ERROR,
                message=f"Invalid start_date '{extracted.start_date}', expected YYYY-MM-DD.",
            )

        password = self.password_service.generate_password(self.settings.intake_password_length)
        full_name = f"{extracted.first_name} {extracted.last_name}".strip()

        try:
            employee = await self.employee_repo.create(
                first_name=extracted.first_name,
                last_name=extracted.last_name,
                email=email,
                job_title=extracted.job_title,
                department=extracted.department,
                joining_date=joining_date,
                status=EmployeeStatus.ACTIVE.value,
                created_by=actor_id or self.settings.system_actor_id,
            )
            account = await self.user_repo.create(
                name=full_name,
                email=email,
                password_hash=self.password_service.hash_password(password),
                role=UserRole.EMPLOYEE.value,
                employee_id=employee.id,
            )
            employee_id, user_id = employee.id, account.id
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            reason = sanitize_exception_message(e)
            log_warning(logger, f"Intake failed to create {mask_email(email)}", e)
            return IntakeOutcome(
                status=IntakeStatus.ERROR,
                message=f"Failed to create employee record: {reason}",
            )

        try:
            await self.email_service.send_welcome_email(email, full_name, password)
        except EmailDeliveryError as e:
            logger.warning(
                "Welcome email to %s failed after provisioning: %s",
                mask_email(email),
                e.reason,
            )
            return self._unsent_email_outcome(employee_id, user_id)
        except Exception as e:
            # The record is committed; a mail failure never aborts the batch
            log_warning(logger, f"Welcome email to {mask_email(email)} failed after provisioning", e)
            return self._unsent_email_outcome(employee_id, user_id)

        return IntakeOutcome(
            status=IntakeStatus.SUCCESS,
            message="Employee record and user account created successfully. Welcome email sent.",
            employee_id=employee_id,
            user_id=user_id,
            email_sent=True,
        )

    @staticmethod
    def _unsent_email_outcome(employee_id: int, user_id: int) -> IntakeOutcome:
        return IntakeOutcome(
            status=IntakeStatus.PARTIAL_SUCCESS,
            message="Employee record and user account created, "
            "but the welcome email could not be sent.",
            employee_id=employee_id,
            user_id=user_id,
            email_sent=False,
        )

    async def resend_welcome_email(self, employee_id: int) -> ResendWelcomeResponse:
        """Issue a fresh one-time password for an employee's account and email it.

        The stored credential is only a hash, so the original password cannot
        be resent. The new hash is committed before sending.

        Raises:
            EmployeeNotFoundError: If the employee does not exist
            AccountNotLinkedError: If the employee has no login account
            EmailDeliveryError: If the email cannot be delivered
        """
        employee = await self.employee_repo.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)

        account = await self.user_repo.get_by_employee_id(employee.id)
        if account is None:
            raise AccountNotLinkedError()

        password = self.password_service.generate_password(self.settings.intake_password_length)
        await self.user_repo.update(
            account, password_hash=self.password_service.hash_password(password)
        )
        await self.session.commit()

        await self.email_service.send_credentials_reset_email(account.email, account.name, password)
        logger.info("Resent credentials for employee %s", employee.id)

        return ResendWelcomeResponse(
            message="Welcome email sent successfully",
            employee_id=employee.id,
            user_id=account.id,
        )
