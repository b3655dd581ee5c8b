"""Entry point for release-siren: check for a newer release and prompt in the terminal."""

import argparse
import logging
import sys


def main(argv=None):
    parser = argparse.ArgumentParser(description="Check whether a newer release of the app is available")
    parser.add_argument("--config", default=None, help="Path to config.json. Default: next to the executable")
    parser.add_argument("--state", default=None, help="Path to the state file. Default: next to the executable")
    parser.add_argument(
        "--keychain",
        action="store_true",
        help="Keep the check state in the OS keychain instead of a JSON file",
    )
    parser.add_argument(
        "--frequency",
        type=int,
        default=0,
        help="Minimum days between two remote checks. Default: 0 (check every time)",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    from release_siren.adapters.config.json_config_adapter import JsonConfigAdapter
    from release_siren.adapters.localization.catalog_localizer import CatalogLocalizer
    from release_siren.adapters.lookup.http_lookup_adapter import HttpLookupAdapter
    from release_siren.config import settings_from_dict
    from release_siren.domain.errors import ConfigurationError
    from release_siren.domain.model import CheckFrequency
    from release_siren.ui.terminal_prompt import present_decision
    from release_siren.usecases.check_update import CheckUpdateUseCase

    config = JsonConfigAdapter(args.config)
    if not config.is_configured():
        print(f"Missing app_id or installed_version in {config.path}")
        sys.exit(1)

    try:
        settings = settings_from_dict(config.load())
        frequency = CheckFrequency(args.frequency)
    except (ConfigurationError, ValueError) as e:
        print(f"Invalid configuration: {e}")
        sys.exit(1)
    if args.debug:
        settings.debug_logging = True

    if args.keychain:
        from release_siren.adapters.state.keyring_state_adapter import KeyringStateStore
        store = KeyringStateStore()
    else:
        from release_siren.adapters.state.json_state_adapter import JsonStateStore
        store = JsonStateStore(args.state)

    use_case = CheckUpdateUseCase(
        settings=settings,
        lookup=HttpLookupAdapter(timeout=settings.timeout),
        store=store,
        localizer=CatalogLocalizer(default_locale=settings.forced_locale),
    )

    decision = use_case.check_version(frequency)
    response = present_decision(decision, use_case.action_label)
    if response is not None:
        use_case.report(response)


if __name__ == "__main__":
    main()
