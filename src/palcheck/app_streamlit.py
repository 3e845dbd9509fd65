"""Palcheck Streamlit App (local dashboard for candidate validation)."""

from __future__ import annotations

import time
from pathlib import Path

import altair as alt
import pandas as pd
import streamlit as stream

from palcheck.config import PRESETS, get_preset
from palcheck.errors import InputSourceError
from palcheck.records import ValidatedCandidate
from palcheck.reporting import human_summary, to_frame, to_json
from palcheck.scanner import scan_directory
from palcheck.utils import get_logger


@stream.cache_resource
def get_cached_logger(name: str):
    """Initializes and caches the logger."""
    return get_logger(name)


def outcome_label(candidate: ValidatedCandidate) -> str:
    if candidate.error:
        return "unavailable"
    return "validated" if candidate.position_validated else "mismatch"


def size_chart(frame: pd.DataFrame) -> alt.Chart:
    """Bar chart of candidate counts per size, coloured by outcome."""
    return (
        alt.Chart(frame)
        .mark_bar()
        .encode(
            x=alt.X("size:O", title="Candidate size"),
            y=alt.Y("count():Q", title="Candidates"),
            color=alt.Color(
                "outcome:N",
                scale=alt.Scale(
                    domain=["validated", "mismatch", "unavailable"],
                    range=["#2ca02c", "#d62728", "#7f7f7f"],
                ),
                legend=alt.Legend(title="Outcome"),
            ),
            tooltip=["size", "outcome", "count()"],
        )
    )


def main():
    # 1. Page Config
    stream.set_page_config(page_title="Palcheck", page_icon="π", layout="wide")
    log = get_cached_logger("palcheck")

    stream.title("Palcheck: palindromes in the digits of pi")
    stream.caption("Filter candidate records and confirm their positions with the digit service.")

    # 2. Sidebar Options
    with stream.sidebar:
        stream.header("Scan options")
        results_dir = stream.text_input("Results directory", value="full_results")
        preset_name = stream.selectbox("Preset", sorted(PRESETS))
        preset = get_preset(preset_name)
        threshold = stream.number_input(
            "Minimum size", min_value=1, value=preset.threshold, step=1
        )
        excluded = stream.text_input(
            "Excluded trailing digits", value=",".join(sorted(preset.excluded_digits))
        )
        pattern = stream.text_input("File pattern", value=preset.pattern)
        run_clicked = stream.button("Validate", type="primary", use_container_width=True)

    if not run_clicked:
        stream.info("Choose a results directory and press **Validate**.")
        return

    # 3. Scan Logic
    try:
        config = preset.with_overrides(
            threshold=int(threshold), excluded_digits=excluded, pattern=pattern
        )
    except ValueError as e:
        stream.error(f"Invalid options: {e}")
        return

    start_time = time.perf_counter()
    with stream.status("Validating candidates...", expanded=True):
        try:
            candidates = scan_directory(Path(results_dir), config)
        except InputSourceError as e:
            log.error("%s", e)
            stream.error(str(e))
            return
    elapsed = time.perf_counter() - start_time

    # 4. Results Display
    tab_overview, tab_table, tab_report = stream.tabs(
        ["Overview 📊", "Candidates 🔍", "JSON Report 📥"]
    )

    with tab_overview:
        col_a, col_b, col_c = stream.columns(3)
        col_a.metric("Candidates", len(candidates))
        col_b.metric("Validated", sum(1 for c in candidates if c.position_validated))
        col_c.metric("Scan Time", f"{elapsed:.2f}s")
        stream.text(human_summary(candidates))

        if candidates:
            frame = to_frame(candidates)
            frame["outcome"] = [outcome_label(c) for c in candidates]
            stream.altair_chart(size_chart(frame), use_container_width=True)

    with tab_table:
        if candidates:
            stream.dataframe(to_frame(candidates), use_container_width=True, hide_index=True)
        else:
            stream.info("No candidates passed the filter.")

    with tab_report:
        if candidates:
            stream.download_button(
                "⬇️ Download JSON Report",
                data=to_json(candidates, None, return_as_string=True),
                file_name="palcheck-report.json",
                mime="application/json",
                use_container_width=True,
            )
        else:
            stream.info("No report generated.")
