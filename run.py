"""
Main Entry Point for Globe Camera Framing

This script frames a configured geographic region:
1. Load configuration from YAML
2. Apply command-line overrides (heading, pitch, viewport)
3. Compute the camera pose and the region outline
4. Print the pose and optionally write the fly-to request as JSON

Usage:
    python run.py --config configs/subsurface.yaml
    python run.py --config configs/subsurface.yaml --heading 45 --pitch -30 --output pose.json
"""

import argparse
import json
import sys
from pathlib import Path
from omegaconf import OmegaConf

# Add project paths
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

# Project imports
from globeframe import make_pose_from_config
from globeframe.utils import format_vector, to_float_list


# ============================================================================
# Configuration & Setup
# ============================================================================

def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Camera framing of a geographic region for globe viewers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py --config configs/subsurface.yaml
  python run.py --config configs/subsurface.yaml --heading 90
  python run.py --config configs/subsurface.yaml --pitch -90 --output pose.json
        """
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default="configs/subsurface.yaml",
        help="Path to YAML configuration file"
    )

    parser.add_argument(
        "--heading",
        type=float,
        default=None,
        help="Override view heading (degrees)"
    )

    parser.add_argument(
        "--pitch",
        type=float,
        default=None,
        help="Override view pitch (degrees)"
    )

    parser.add_argument(
        "--aspect-ratio",
        type=float,
        default=None,
        help="Override viewport aspect ratio (width / height)"
    )

    parser.add_argument(
        "--fov",
        type=float,
        default=None,
        help="Override field of view (degrees)"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Write the fly-to request and outline to this JSON file"
    )

    return parser.parse_args(argv)


def load_config(config_path: str) -> OmegaConf:
    """
    Load and validate YAML configuration

    Args:
        config_path: Path to YAML config file

    Returns:
        OmegaConf configuration object
    """
    if not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    config = OmegaConf.load(config_path)

    # Validate required fields
    required_sections = ["region", "viewport"]

    for section in required_sections:
        if section not in config:
            raise ValueError(f"Missing required config section: {section}")

    rect = config.region.rectangle
    print(f"[Config] Loaded configuration from: {config_path}")
    print(f"  - Rectangle: W={rect.west} S={rect.south} E={rect.east} N={rect.north}")
    print(f"  - Exaggeration: {config.region.get('terrain_exaggeration', 1.0)}")

    return config


def apply_cli_overrides(config: OmegaConf, args) -> OmegaConf:
    """
    Apply command-line argument overrides to config

    Args:
        config: Base configuration
        args: Parsed command-line arguments

    Returns:
        Modified configuration
    """
    # empty YAML sections load as None
    if not config.get("view"):
        config.view = {}
    if not config.get("output"):
        config.output = {}

    if args.heading is not None:
        config.view.heading_deg = args.heading
        print(f"[Config] Override heading: {args.heading}°")

    if args.pitch is not None:
        config.view.pitch_deg = args.pitch
        print(f"[Config] Override pitch: {args.pitch}°")

    if args.aspect_ratio is not None:
        config.viewport.aspect_ratio = args.aspect_ratio
        print(f"[Config] Override aspect ratio: {args.aspect_ratio}")

    if args.fov is not None:
        config.viewport.fov_deg = args.fov
        print(f"[Config] Override FOV: {args.fov}°")

    if args.output is not None:
        config.output.pose_path = args.output
        print(f"[Config] Override output: {args.output}")

    return config


# ============================================================================
# Framing
# ============================================================================

def report_pose(result):
    """Print the framed pose"""
    pose = result["pose"]

    print(f"\n[Camera Pose]")
    print(f"  - Position: {format_vector(pose.position)}")
    print(f"  - Direction: {format_vector(pose.direction)}")
    print(f"  - Up: {format_vector(pose.up)}")
    print(f"  - Range: {pose.range:.3f} m")
    print(f"  - Height: {pose.height:.3f} m")
    print(f"  - Maximum height: {pose.maximum_height:.3f} m")
    if pose.clamped:
        print(f"  - Clamped below surface")


def write_pose(result, output_path: str):
    """Write the fly-to request and region outline as JSON"""
    payload = dict(result["fly_to"])
    payload["outline"] = [to_float_list(p) for p in result["outline"]]

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(payload, f, indent=2)

    print(f"[Output] Pose written to: {path}")


def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        config = apply_cli_overrides(config, args)

        result = make_pose_from_config(OmegaConf.to_container(config, resolve=True))
        report_pose(result)

        if config.output.get("pose_path"):
            write_pose(result, config.output.pose_path)

    except KeyboardInterrupt:
        print("\n[Info] Interrupted by user")
    except Exception as e:
        print(f"\n[Error] Framing failed: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
