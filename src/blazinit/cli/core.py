from blazinit.core.context import BlazinitContext


def resolve_profile_name(ctx: BlazinitContext, profile: str | None) -> str:
    """Use the explicit profile argument, or fall back to the configured default."""
    if profile is not None:
        return profile
    return ctx.config.default_profile
