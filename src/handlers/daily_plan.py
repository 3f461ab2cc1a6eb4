"""
Lambda handler for daily cycle plans.
"""
from typing import Dict, List, Optional
from datetime import date, timedelta
import json

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from src.config import HISTORY_WINDOW_DAYS
from src.models.cycle import CycleConfiguration, CycleDates
from src.models.daily_plan import DailyPlan
from src.services.cycle import get_cycle_dates, validate_date
from src.services.daily_plan import build_daily_plan, generate_daily_report
from src.utils.logging import logger

tracer = Tracer()

class DailyPlanRequest(CycleConfiguration):
    """Daily plan request model."""
    plan_date: Optional[date] = Field(None, alias="date")
    days: List[int] = Field(default_factory=list, max_length=45)

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("days")
    @classmethod
    def check_days(cls, days: List[int]) -> List[int]:
        if any(day < 1 for day in days):
            raise ValueError("cycle days start at 1")
        return days

    @model_validator(mode="after")
    def check_period_start(self) -> "DailyPlanRequest":
        if self.last_period_start is None:
            return self
        today = self.plan_date or date.today()
        min_date = today - timedelta(days=HISTORY_WINDOW_DAYS)
        if not validate_date(self.last_period_start, min_date, today):
            raise ValueError(
                f"last_period_start must be between {min_date.isoformat()} and {today.isoformat()}"
            )
        return self

class DailyPlanResponse(BaseModel):
    """Daily plan response model."""
    plan: DailyPlan
    report: str
    dates: Optional[CycleDates] = None
    previews: List[DailyPlan] = Field(default_factory=list)

@logger.inject_lambda_context
@tracer.capture_lambda_handler
def handler(event: Dict, context: LambdaContext) -> Dict:
    """
    Handle daily plan requests.

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context

    Returns:
        API Gateway Lambda proxy response
    """
    try:
        request = DailyPlanRequest(**json.loads(event.get('body') or '{}'))
        response = create_daily_plan(request)

        return {
            'statusCode': 200,
            'body': response.model_dump_json()
        }

    except (ValidationError, json.JSONDecodeError) as e:
        logger.warning('Invalid daily plan request', extra={'error': str(e)})
        return {
            'statusCode': 400,
            'body': json.dumps({'error': str(e)})
        }

    except Exception as e:
        logger.exception('Failed to build daily plan')
        return {
            'statusCode': 500,
            'body': json.dumps({'error': str(e)})
        }

@tracer.capture_method
def create_daily_plan(request: DailyPlanRequest) -> DailyPlanResponse:
    """
    Build the requested plan, cycle dates and day previews.

    Args:
        request: Daily plan request

    Returns:
        Daily plan response
    """
    config = CycleConfiguration(
        last_period_start=request.last_period_start,
        cycle_length=request.cycle_length,
        period_length=request.period_length
    )

    plan = build_daily_plan(config, today=request.plan_date)
    previews = [
        build_daily_plan(config, today=request.plan_date, day=day)
        for day in request.days
    ]
    dates = get_cycle_dates(config) if config.last_period_start else None

    return DailyPlanResponse(
        plan=plan,
        report=generate_daily_report(plan),
        dates=dates,
        previews=previews
    )
