"""
Configuration settings for the sky obstruction (shadow) analysis
"""

from dataclasses import dataclass, field
from typing import Optional


LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class GeometryConfig:
    """Wall extrusion settings"""
    # Cadastral height codes count floors, not meters
    floor_height_m: float = 3.0

    # Overhangs block everything above their base, so their top is "infinitely" high
    overhang_sentinel_z: float = 9999999999.0
    overhang_group_id: str = "overhang"


@dataclass
class ReducerConfig:
    """Shadow reduction settings"""
    # Shadows fully inside [-180, -edge] or [edge, 180] are discarded
    edge_band_deg: float = 123.0

    # Coverage raster, one cell per degree starting at azimuth -180 and elevation 0
    grid_azimuth_cells: int = 360
    grid_elevation_cells: int = 90

    # Wall-clock budget checked between coverage passes (None = no limit)
    coverage_time_budget_s: Optional[float] = None


@dataclass
class LoggingConfig:
    """Console sink settings used by setup_logging"""
    level: str = "INFO"
    verbose_level: str = "DEBUG"
    format: str = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{message}</cyan>"


@dataclass
class ShadowConfig:
    """Shadow analysis configuration"""
    # Half side of the square search area around the observer (meters)
    search_buffer_m: float = 100.0

    geometry: GeometryConfig = field(default_factory=GeometryConfig)
    reducer: ReducerConfig = field(default_factory=ReducerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global config instance
config = ShadowConfig()


def get_config() -> ShadowConfig:
    """Get global configuration"""
    return config


def validate_config(config: ShadowConfig) -> None:
    """
    Validate that all required configuration values are set.
    Raises ValueError if any required value is missing or invalid.
    """
    errors = []

    if config.search_buffer_m is None:
        errors.append("search_buffer_m is required in config but not set")
    elif config.search_buffer_m <= 0:
        errors.append(f"search_buffer_m must be positive, got {config.search_buffer_m}")

    if config.geometry is None:
        errors.append("geometry configuration is required but not set")
    else:
        if config.geometry.floor_height_m is None or config.geometry.floor_height_m <= 0:
            errors.append(f"geometry.floor_height_m must be positive, got {config.geometry.floor_height_m}")
        if config.geometry.overhang_sentinel_z is None or config.geometry.overhang_sentinel_z <= 0:
            errors.append(f"geometry.overhang_sentinel_z must be positive, got {config.geometry.overhang_sentinel_z}")
        if not config.geometry.overhang_group_id:
            errors.append("geometry.overhang_group_id is required but not set")

    if config.reducer is None:
        errors.append("reducer configuration is required but not set")
    else:
        reducer = config.reducer
        if reducer.edge_band_deg is None or not 0 <= reducer.edge_band_deg <= 180:
            errors.append(f"reducer.edge_band_deg must be between 0 and 180, got {reducer.edge_band_deg}")
        if not reducer.grid_azimuth_cells or reducer.grid_azimuth_cells < 1:
            errors.append(f"reducer.grid_azimuth_cells must be at least 1, got {reducer.grid_azimuth_cells}")
        if not reducer.grid_elevation_cells or reducer.grid_elevation_cells < 1:
            errors.append(f"reducer.grid_elevation_cells must be at least 1, got {reducer.grid_elevation_cells}")
        if reducer.coverage_time_budget_s is not None and reducer.coverage_time_budget_s <= 0:
            errors.append(f"reducer.coverage_time_budget_s must be positive, got {reducer.coverage_time_budget_s}")

    if config.logging is None:
        errors.append("logging configuration is required but not set")
    else:
        for name in ("level", "verbose_level"):
            value = getattr(config.logging, name)
            if value not in LOG_LEVELS:
                errors.append(f"logging.{name} must be one of {', '.join(LOG_LEVELS)}, got {value}")
        if not config.logging.format:
            errors.append("logging.format is required but not set")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)
