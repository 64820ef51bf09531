"""Core workflow for meander design."""

import itertools
import time
from typing import Iterable
from typing import Optional

import pandas as pd
from loguru import logger

from meanderx.config import MeanderConfig
from meanderx.design import ChannelDesign
from meanderx.ecology.ecology import assess_ecology
from meanderx.hydraulics.hydraulics import compute_hydraulics
from meanderx.meander.meander import synthesize_meander
from meanderx.params import StreamParams


def format_time_duration(seconds):
    """
    Format seconds into a human-readable time string.
    For longer durations, shows hours and minutes; for shorter ones, shows
    minutes and seconds.
    """

    hours, remainder = divmod(int(seconds), 3600)
    minutes, whole_seconds = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}h {minutes}m {whole_seconds}s"
    elif minutes > 0:
        return f"{minutes}m {whole_seconds}s"
    else:
        return f"{seconds:.2f}s"


def design_channel(
    params: StreamParams, config: Optional[MeanderConfig] = None
) -> ChannelDesign:
    """
    Synthesize a meander for the valley line and evaluate it

    Parameters
    ----------
    params : StreamParams
        Design parameters. See help(StreamParams) for details.
    config : MeanderConfig, optional
        Configuration for the workflow. See help(MeanderConfig) for details.

    Returns
    -------
    ChannelDesign
        meander centerline, hydraulic metrics and ecological assessment
    """
    if config is None:
        config = MeanderConfig()

    params.validate()

    start_time = time.time()
    logger.info("Starting meander design workflow")

    logger.info("Synthesizing meander")
    meander = synthesize_meander(
        params.valley_line,
        params.amplitude,
        params.wavelength,
        smoothing=config.smoothing,
        synthesis=config.synthesis,
    )

    logger.info("Computing hydraulics")
    metrics = compute_hydraulics(params, meander, config.hydraulics)

    logger.info("Assessing ecology")
    assessment = assess_ecology(metrics, params, config.ecology, config.hydraulics)

    logger.info(f"Total execution time: {format_time_duration(time.time() - start_time)}")
    logger.success(
        f"Meander design completed: sinuosity {metrics.sinuosity_index:.2f}, "
        f"health {assessment.health.value}"
    )
    return ChannelDesign(params, meander, metrics, assessment)


def sweep_designs(
    params: StreamParams,
    amplitudes: Iterable[float],
    wavelengths: Iterable[float],
    config: Optional[MeanderConfig] = None,
) -> pd.DataFrame:
    """
    Evaluate every amplitude / wavelength combination for one valley

    Returns
    -------
    pd.DataFrame
        one row per candidate with the hydraulic metrics, habitat units,
        hyporheic potential, sediment regime, health and warning count
    """
    records = []
    for amplitude, wavelength in itertools.product(amplitudes, wavelengths):
        candidate = params.replace(amplitude=amplitude, wavelength=wavelength)
        design = design_channel(candidate, config)
        record = {"amplitude": amplitude, "wavelength": wavelength}
        record.update(design.metrics.to_dict())
        record.update(design.assessment.stats)
        record["health"] = design.health.value
        record["warnings"] = len(design.warnings)
        records.append(record)
    logger.debug(f"evaluated {len(records)} candidate designs")
    return pd.DataFrame.from_records(records)
