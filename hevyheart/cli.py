"""Interactive console for copying Strava heart rate onto a Hevy workout.

Run with ``python -m hevyheart sync`` after configuring the environment
variables (or ``.env``) described in :mod:`hevyheart.settings`.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Optional, Sequence, TypeVar

import httpx
import typer
from pydantic import ValidationError

from .application import (
    HeartRateStreamMissingError,
    HeartRateSyncPlan,
    PrepareHeartRateSyncUseCase,
    UploadHeartRateSyncUseCase,
    authenticate_hevy,
    authorize_strava,
)
from .auth import AuthorizationFailed, RedirectCaptureServer
from .hevy import HevyAuthError, create_hevy_client
from .models.hevy import HevyWorkout
from .models.strava import StravaActivity
from .settings import Settings, get_settings
from .strava import StravaAuthError, create_strava_client

logger = logging.getLogger(__name__)

T = TypeVar("T")

app = typer.Typer(
    name="hevyheart",
    help="Copy a Strava heart-rate stream onto a Hevy workout.",
    add_completion=False,
)


def _setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


def select_item(
    items: Sequence[T],
    describe: Callable[[T], str],
    label: str,
) -> T:
    """Print ``items`` as a numbered list and prompt until one is chosen."""
    for position, item in enumerate(items, start=1):
        typer.echo(f"{position:2}. {describe(item)}")
    typer.echo()

    while True:
        selection = typer.prompt(f"Select {label} (1-{len(items)})", type=int)
        if 1 <= selection <= len(items):
            return items[selection - 1]
        typer.echo("Invalid selection. Please try again.")


def describe_activity(activity: StravaActivity) -> str:
    lines: List[str] = [activity.name]
    if activity.start_date is not None:
        lines.append(f"     Date: {activity.start_date:%Y-%m-%d %H:%M}")
    lines.append(f"     Type: {activity.type}")
    lines.append(f"     Duration: {_format_seconds(activity.elapsed_time)}")
    if activity.average_heartrate is not None:
        lines.append(f"     Avg HR: {activity.average_heartrate:.0f} bpm")
    return "\n".join(lines)


def describe_workout(workout: HevyWorkout) -> str:
    duration = int((workout.end_time - workout.start_time).total_seconds())
    lines = [
        workout.title,
        f"     Date: {workout.start_time:%Y-%m-%d %H:%M}",
        f"     Duration: {_format_seconds(duration)}",
        f"     Exercises: {len(workout.exercises)}",
    ]
    if workout.description:
        lines.append(f"     Description: {workout.description}")
    return "\n".join(lines)


def _format_seconds(total: int) -> str:
    hours, remainder = divmod(max(total, 0), 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02}:{minutes:02}:{seconds:02}"


def show_plan(plan: HeartRateSyncPlan) -> None:
    typer.echo(
        f"Synchronizing heart rate data from Strava activity '{plan.activity.name}'"
    )
    typer.echo(f"to Hevy workout '{plan.workout.v1.title}'")
    typer.echo()
    typer.echo(f"Generated {len(plan.heart_rate.samples)} heart rate samples")
    typer.echo(f"Total calories: {plan.heart_rate.total_calories:.0f}")
    if plan.summary is not None:
        typer.echo(
            f"Heart rate - Min: {plan.summary.minimum:.0f} bpm, "
            f"Avg: {plan.summary.average:.0f} bpm, "
            f"Max: {plan.summary.maximum:.0f} bpm"
        )


async def run_sync(
    settings: Settings,
    *,
    activity_id: Optional[int] = None,
    workout_id: Optional[str] = None,
    assume_yes: bool = False,
) -> None:
    async with httpx.AsyncClient() as http_client:
        strava = create_strava_client(http_client=http_client, settings=settings)
        hevy = create_hevy_client(http_client=http_client, settings=settings)

        typer.echo("\n--- Step 1: Hevy Authentication ---")
        credentials = None
        if not hevy.is_authenticated and not settings.has_hevy_credentials:
            if not typer.confirm("No Hevy auth token configured. Log in now?"):
                raise HevyAuthError("Hevy V2 authentication is required")
            credentials = (
                typer.prompt("Hevy email or username"),
                typer.prompt("Hevy password", hide_input=True),
            )
        account = await authenticate_hevy(hevy, settings, credentials)
        if account is not None:
            typer.echo(f"Authenticated with Hevy as {account.username}")

        typer.echo("\n--- Step 2: Strava Authentication ---")
        typer.echo("A browser will open with the Strava authorization page.")
        await authorize_strava(
            strava,
            RedirectCaptureServer(settings.strava_redirect_uri),
            on_browser_unavailable=lambda url: typer.echo(
                f"Please open this URL in your browser:\n{url}"
            ),
        )
        typer.echo("Authenticated with Strava")

        if activity_id is None:
            typer.echo("\n--- Step 3: Strava Activities ---")
            activities = await strava.list_activities()
            if not activities:
                typer.echo("No activities with heart rate data found")
                raise typer.Exit(1)
            activity_id = select_item(activities, describe_activity, "an activity").id

        if workout_id is None:
            typer.echo("\n--- Step 4: Hevy Workouts ---")
            workouts = await hevy.list_workouts()
            if not workouts:
                typer.echo("No Hevy workouts found")
                raise typer.Exit(1)
            workout_id = select_item(workouts, describe_workout, "a workout").id

        typer.echo("\n--- Step 5: Synchronizing Heart Rate Data ---")
        plan = await PrepareHeartRateSyncUseCase(strava, hevy)(activity_id, workout_id)
        show_plan(plan)

        if not (assume_yes or typer.confirm("Update the Hevy workout with this heart rate data?")):
            typer.echo("Skipped updating Hevy workout.")
            return

        typer.echo(
            "Hevy keeps biometrics only on new workouts, so a copy will be created."
        )
        delete_original = assume_yes or typer.confirm(
            f"Delete the original workout {plan.workout.v1.id} after a successful upload?"
        )
        outcome = await UploadHeartRateSyncUseCase(hevy)(
            plan, delete_original=delete_original
        )
        if not outcome.uploaded:
            typer.echo("Failed to update Hevy workout. Check your API key and permissions.")
            raise typer.Exit(1)

        typer.echo("Hevy workout updated successfully!")
        if outcome.original_deleted:
            typer.echo("Original workout deleted.")
        else:
            typer.echo(
                f"Remember to delete the original workout {plan.workout.v1.id} "
                f"('{plan.workout.v1.title}') to avoid duplicates."
            )


@app.command()
def sync(
    activity_id: Optional[int] = typer.Option(
        None, "--activity-id", help="Strava activity to read heart rate from"
    ),
    workout_id: Optional[str] = typer.Option(
        None, "--workout-id", help="Hevy workout to attach heart rate to"
    ),
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Upload and delete the original without asking"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Synchronize heart rate from a Strava activity onto a Hevy workout."""
    _setup_logging(verbose)

    try:
        settings = get_settings()
    except ValidationError as exc:
        typer.echo("Configuration is incomplete:")
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"])
            typer.echo(f"  {field.upper()}: {error['msg']}")
        raise typer.Exit(1) from exc

    try:
        asyncio.run(
            run_sync(
                settings,
                activity_id=activity_id,
                workout_id=workout_id,
                assume_yes=yes,
            )
        )
    except (
        AuthorizationFailed,
        StravaAuthError,
        HevyAuthError,
        HeartRateStreamMissingError,
        httpx.HTTPError,
    ) as exc:
        logger.debug("Synchronization aborted", exc_info=True)
        typer.echo(f"Error: {exc}")
        raise typer.Exit(1) from exc

    typer.echo("\nHeart rate synchronization completed.")


@app.callback()
def main() -> None:
    """HevyHeart command line."""
