"""Sighting maintenance CLI commands."""

import asyncio

import typer

sightings_app = typer.Typer()


@sightings_app.command("resolve-pending")
def resolve_pending(
    limit: int | None = typer.Option(None, "--limit", min=1, help="Maximum sightings to attempt"),
) -> None:
    """Reverse geocode sightings that are still unresolved.

    The process does not serve ``/metrics``, so its counters are reported
    in the summary instead.
    """
    attempted, resolved, counters = asyncio.run(_resolve_pending(limit))
    typer.echo(f"Attempted: {attempted}")
    typer.echo(f"Resolved:  {resolved}")
    typer.echo(f"Remaining: {attempted - resolved}")
    typer.echo(f"Provider errors: {int(counters['api_errors'])}")


async def _resolve_pending(limit: int | None) -> tuple[int, int, dict[str, float]]:
    """Async implementation of resolve-pending."""
    from pet_tracker.core.config import get_settings
    from pet_tracker.core.database import dispose_engine, get_session_factory, init_engine
    from pet_tracker.core.metrics import SightingMetrics
    from pet_tracker.lib.geocoder import get_reverse_geocoder
    from pet_tracker.services.sighting_service import resolve_pending_sightings

    settings = get_settings()
    geocoder = get_reverse_geocoder(settings)
    if not geocoder.is_configured:
        typer.echo("PositionStack API key is not configured (set POSITIONSTACK_API_KEY).", err=True)
        raise typer.Exit(code=1)

    metrics = SightingMetrics()
    init_engine(settings.database_url)
    try:
        factory = get_session_factory()
        async with factory() as session:
            attempted, resolved = await resolve_pending_sightings(
                session,
                geocoder=geocoder,
                metrics=metrics,
                limit=limit or settings.resolve_pending_limit,
            )
    finally:
        await dispose_engine()
    return attempted, resolved, metrics.snapshot()
