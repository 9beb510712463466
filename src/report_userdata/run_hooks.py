"""Run completion hooks.

``finalize_run`` is the one call a host makes once catalog application has
finished and a report exists. Tagging is best-effort enrichment: a failure is
logged and the report is still returned.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from report_userdata.class_tagger import tag_report_from_catalog
from report_userdata.config_loader import load_run_config
from report_userdata.report_annotator import attach_userdata
from report_userdata.schemas import RunReport, TaggerConfig

logger = logging.getLogger(__name__)


def new_report(**fields: Any) -> RunReport:
    """Construct a RunReport with userdata attached."""
    return attach_userdata(RunReport(**fields))


def finalize_run(
    report: RunReport,
    catalog: Any = None,
    config: Optional[TaggerConfig] = None,
    config_dir: Optional[Path] = None,
) -> RunReport:
    """Attach userdata and tag the report with the catalog's classes.

    Args:
        report: Report produced by the completed run
        catalog: Applied catalog, or None when the run produced none (for
            example when compilation failed); tagging is then skipped
        config: Tagger settings; takes precedence over ``config_dir``
        config_dir: Directory holding ``tagger.yaml`` and the ``enabled``
            marker; tagging is off unless the marker exists. Defaults apply
            when neither ``config`` nor ``config_dir`` is given.

    Returns:
        The same report, tagged when possible
    """
    attach_userdata(report)

    if config is None and config_dir is not None:
        config, err = load_run_config(config_dir)
        if err:
            logger.warning("Could not load tagger config from %s: %s", config_dir, err.message)
            return report
    config = config or TaggerConfig()

    if not config.enabled:
        logger.debug("Class tagging disabled; report for %s left untagged", report.host)
        return report
    if catalog is None:
        logger.debug("No catalog for run on %s; skipping class tagging", report.host)
        return report

    try:
        tag_report_from_catalog(report, catalog, config)
    except Exception as exc:
        logger.warning("Class tagging failed for %s: %s", report.host, exc)
    return report
