"""
Configuration management module for CommunityWeb community analysis.

This module provides centralized configuration management with validation,
default values, and clear error messages for all analysis parameters.
Configuration is layered: dataclass defaults, then an optional JSON file,
then command-line overrides.
"""

import argparse
import json
import logging
import os
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .core.exceptions import ConfigurationError
from .utils.validation import (
    validate_choice,
    validate_n_jobs,
    validate_optional_positive_integer,
    validate_non_negative_integer,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AnalysisType(Enum):
    """Analyses the pipeline can run on a loaded graph."""
    EGONET = "egonet"
    SCC = "scc"
    BETWEENNESS = "betweenness"
    GIRVAN_NEWMAN = "girvan_newman"
    FAST_NEWMAN = "fast_newman"


@dataclass
class GraphConfig:
    """Configuration for how the input graph is built."""
    directed: bool = False

    def __post_init__(self):
        if not isinstance(self.directed, bool):
            raise ValueError("directed must be a boolean")


@dataclass
class AnalysisConfig:
    """Configuration for the analysis stage."""
    analysis_type: AnalysisType = AnalysisType.GIRVAN_NEWMAN
    egonet_center: Optional[int] = None
    n_jobs: int = 1
    max_divisive_steps: Optional[int] = None

    def __post_init__(self):
        """Validate analysis configuration after initialization."""
        if not isinstance(self.analysis_type, AnalysisType):
            raise ValueError(
                f"analysis_type must be an AnalysisType enum value, got {type(self.analysis_type)}"
            )

        if self.analysis_type == AnalysisType.EGONET and self.egonet_center is None:
            raise ValueError("'egonet_center' must be set for the egonet analysis. "
                             "Set analysis.egonet_center in configuration file or use --center CLI parameter")

        if self.egonet_center is not None and (
            not isinstance(self.egonet_center, int) or isinstance(self.egonet_center, bool)
        ):
            raise ValueError("egonet_center must be an integer vertex identifier")

        validate_n_jobs(self.n_jobs)
        validate_optional_positive_integer(self.max_divisive_steps, "max_divisive_steps")


@dataclass
class OutputConfig:
    """Configuration for result reporting."""
    top_k: int = 10
    output_file: Optional[str] = None
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate output configuration after initialization."""
        validate_non_negative_integer(self.top_k, "top_k")
        if self.output_file is not None and not isinstance(self.output_file, str):
            raise ValueError("output_file must be a string")
        self.log_level = validate_choice(str(self.log_level).upper(), "log_level", LOG_LEVELS)


@dataclass
class CommunityWebConfig:
    """Main configuration class containing all CommunityWeb settings."""
    input_file: str = "edges.txt"
    graph: GraphConfig = field(default_factory=GraphConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def __post_init__(self):
        if not self.input_file or not isinstance(self.input_file, str):
            raise ValueError("input_file must be a non-empty string")


def load_config_from_dict(config_dict: Dict[str, Any]) -> CommunityWebConfig:
    """
    Creates a CommunityWebConfig instance from a dictionary.

    Args:
        config_dict: Configuration dictionary with optional ``graph``,
            ``analysis`` and ``output`` sections.

    Returns:
        CommunityWebConfig: Validated configuration instance.

    Raises:
        ConfigurationError: If configuration validation fails.
    """
    try:
        graph_dict = config_dict.get("graph", {}) or {}
        analysis_dict = config_dict.get("analysis", {}) or {}
        output_dict = config_dict.get("output", {}) or {}

        # Handle analysis type - convert string to enum if needed
        type_value = analysis_dict.get("analysis_type", AnalysisType.GIRVAN_NEWMAN.value)
        if isinstance(type_value, str):
            try:
                analysis_type = AnalysisType(type_value.lower())
            except ValueError:
                valid = [t.value for t in AnalysisType]
                raise ValueError(f"Invalid analysis type '{type_value}'. Must be one of: {valid}. "
                                 "Use the --analysis CLI flag or set analysis.analysis_type in configuration file")
        elif isinstance(type_value, AnalysisType):
            analysis_type = type_value
        else:
            raise ValueError(f"Invalid analysis type: {type(type_value)}")

        return CommunityWebConfig(
            input_file=config_dict.get("input_file", "edges.txt"),
            graph=GraphConfig(directed=graph_dict.get("directed", False)),
            analysis=AnalysisConfig(
                analysis_type=analysis_type,
                egonet_center=analysis_dict.get("egonet_center"),
                n_jobs=analysis_dict.get("n_jobs", 1),
                max_divisive_steps=analysis_dict.get("max_divisive_steps"),
            ),
            output=OutputConfig(
                top_k=output_dict.get("top_k", 10),
                output_file=output_dict.get("output_file"),
                log_level=output_dict.get("log_level", "INFO"),
            ),
        )
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e


class ConfigurationManager:
    """
    Configuration management with validation and merging capabilities.

    Handles loading from JSON files and CLI arguments, merging them with
    defaults (file overrides defaults, CLI overrides file) and saving
    configurations back to disk.
    """

    def __init__(self):
        """Initialize the configuration manager."""
        self.logger = logging.getLogger(__name__)

    def load_configuration(
        self,
        config_file: Optional[str] = None,
        cli_args: Optional[Dict] = None,
        check_input: bool = True,
    ) -> CommunityWebConfig:
        """
        Load configuration from file and CLI arguments with validation.

        Args:
            config_file: Optional path to configuration file
            cli_args: Optional dictionary of CLI argument overrides
            check_input: Whether to require that the input file exists

        Returns:
            CommunityWebConfig: Validated configuration instance

        Raises:
            ConfigurationError: If configuration validation fails
            FileNotFoundError: If the config or input file doesn't exist
        """
        base_config = self._serialize_configuration(CommunityWebConfig())

        if config_file:
            if not os.path.exists(config_file):
                raise FileNotFoundError(f"Configuration file not found: {config_file}")

            try:
                with open(config_file, "r", encoding="utf-8") as f:
                    file_config = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid JSON in configuration file {config_file}: {e}") from e

            if not isinstance(file_config, dict):
                raise ConfigurationError(f"Configuration file {config_file} must contain a JSON object")
            base_config = self._merge_configurations(base_config, file_config)
            self.logger.debug(f"Loaded configuration file {config_file}")

        if cli_args:
            base_config = self._merge_configurations(base_config, cli_args)

        config = load_config_from_dict(base_config)

        if check_input:
            self._validate_file_existence(config)

        return config

    def create_cli_parser(self) -> argparse.ArgumentParser:
        """
        Create command-line argument parser for configuration overrides.

        Returns:
            argparse.ArgumentParser: Configured argument parser
        """
        parser = argparse.ArgumentParser(
            prog="communityweb",
            description="CommunityWeb Community Detection Tool",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  communityweb --input edges.txt --analysis girvan_newman
  communityweb --input edges.txt --analysis egonet --center 4
  communityweb --config my_config.json --n-jobs -1 --output results.json
            """
        )

        parser.add_argument(
            "--input", "--input-file",
            dest="input_file",
            help="Path to edge list file (default: edges.txt)"
        )

        parser.add_argument(
            "--config",
            dest="config_file",
            help="Path to JSON configuration file"
        )

        parser.add_argument(
            "--analysis",
            dest="analysis_type",
            choices=[t.value for t in AnalysisType],
            help="Analysis to run"
        )

        parser.add_argument(
            "--center",
            dest="egonet_center",
            type=int,
            help="Center vertex for the egonet analysis"
        )

        parser.add_argument(
            "--directed",
            dest="directed",
            action="store_true",
            default=None,
            help="Treat each edge line as a directed edge"
        )

        parser.add_argument(
            "--n-jobs",
            dest="n_jobs",
            type=int,
            help="Worker processes for edge betweenness (-1 for all cores)"
        )

        parser.add_argument(
            "--max-steps",
            dest="max_divisive_steps",
            type=int,
            help="Stop Girvan-Newman after this many removal steps"
        )

        parser.add_argument(
            "--top-k",
            dest="top_k",
            type=int,
            help="Number of edges or communities to display (0 for all)"
        )

        parser.add_argument(
            "--output", "--output-file",
            dest="output_file",
            help="Write results as JSON to this path"
        )

        parser.add_argument(
            "--log-level",
            dest="log_level",
            choices=LOG_LEVELS,
            type=str.upper,
            help="Logging verbosity (default: INFO)"
        )

        return parser

    def parse_cli_args(self, args: Optional[List[str]] = None) -> Dict[str, Any]:
        """
        Parse command-line arguments into configuration dictionary.

        Args:
            args: Optional list of arguments (uses sys.argv if None)

        Returns:
            Dict[str, Any]: Configuration overrides from CLI. The config file
            path, if given, is returned under ``config_file``.
        """
        parser = self.create_cli_parser()
        parsed_args = parser.parse_args(args)

        cli_config: Dict[str, Any] = {}

        for attr in ["input_file", "config_file"]:
            value = getattr(parsed_args, attr, None)
            if value is not None:
                cli_config[attr] = value

        if parsed_args.directed is not None:
            cli_config["graph"] = {"directed": parsed_args.directed}

        analysis = {}
        for attr in ["analysis_type", "egonet_center", "n_jobs", "max_divisive_steps"]:
            value = getattr(parsed_args, attr, None)
            if value is not None:
                analysis[attr] = value
        if analysis:
            cli_config["analysis"] = analysis

        output = {}
        for attr in ["top_k", "output_file", "log_level"]:
            value = getattr(parsed_args, attr, None)
            if value is not None:
                output[attr] = value
        if output:
            cli_config["output"] = output

        return cli_config

    def save_configuration(self, config: CommunityWebConfig, file_path: str) -> None:
        """
        Save configuration to JSON file.

        Args:
            config: Configuration instance to save
            file_path: Path to save configuration file
        """
        config_dict = self._serialize_configuration(config)

        directory = os.path.dirname(file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(config_dict, f, indent=2, ensure_ascii=False)

        self.logger.info(f"Configuration saved to {file_path}")

    def _validate_file_existence(self, config: CommunityWebConfig) -> None:
        if not os.path.exists(config.input_file):
            raise FileNotFoundError(f"Input file not found: {config.input_file}")

    def _merge_configurations(self, base_config: Dict, overrides: Dict) -> Dict:
        """
        Merge configuration dictionaries with proper precedence.

        Args:
            base_config: Base configuration dictionary
            overrides: Override configuration dictionary

        Returns:
            Dict: Merged configuration dictionary
        """
        merged = base_config.copy()

        for key, value in overrides.items():
            if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
                merged[key] = self._merge_configurations(merged[key], value)
            else:
                merged[key] = value

        return merged

    def _serialize_configuration(self, config: CommunityWebConfig) -> Dict[str, Any]:
        """Serialize configuration to a JSON-compatible dictionary."""
        config_dict = asdict(config)
        config_dict["analysis"]["analysis_type"] = config.analysis.analysis_type.value
        return config_dict


def get_configuration_manager() -> ConfigurationManager:
    """
    Get a configured instance of ConfigurationManager.

    Returns:
        ConfigurationManager: Ready-to-use configuration manager
    """
    return ConfigurationManager()


def load_config_from_file(file_path: str) -> CommunityWebConfig:
    """
    Load configuration from a JSON file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ConfigurationError: If configuration is invalid
    """
    manager = get_configuration_manager()
    return manager.load_configuration(config_file=file_path)


__all__ = [
    "AnalysisType",
    "GraphConfig",
    "AnalysisConfig",
    "OutputConfig",
    "CommunityWebConfig",
    "load_config_from_dict",
    "ConfigurationManager",
    "get_configuration_manager",
    "load_config_from_file",
]
