"""CLI entrypoint for the Lorentz kernel."""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from lorentz_kernel.pkgs.kernel_runtime import (
    BoostRequest, ClassifyRequest, KernelConfig, KernelService,
    RotationRequest, SpinorRequest,
)
from lorentz_kernel.pkgs.lorentz_core import SuperluminalVelocityError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG = 1
EXIT_DOMAIN = 2


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML file."""
    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f) or {}
        logger.info(f"Loaded configuration from {config_path}")
        return config
    except FileNotFoundError:
        logger.warning(f"Config file not found: {config_path}")
        return {}
    except yaml.YAMLError as e:
        logger.error(f"Error parsing config file: {e}")
        sys.exit(EXIT_CONFIG)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Lorentz group kernel: boosts, rotations, classification and spinors",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        '--config', '-c',
        type=str,
        default='configs/default.yaml',
        help='Path to configuration file'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (overrides the config file)'
    )
    parser.add_argument(
        '--audit',
        action='store_true',
        help='Record kernel events in a hash chain and report it'
    )

    sub = parser.add_subparsers(dest='command', required=True)

    boost = sub.add_parser('boost', help='Pure boost from rapidity or velocity')
    group = boost.add_mutually_exclusive_group(required=True)
    group.add_argument('--rapidity', type=float, nargs=3, metavar=('XI_X', 'XI_Y', 'XI_Z'))
    group.add_argument('--velocity', type=float, nargs=3, metavar=('BX', 'BY', 'BZ'),
                       help='Velocity in units of c, |beta| < 1')
    boost.add_argument('--direction', type=float, nargs=3, metavar=('NX', 'NY', 'NZ'),
                       help='Redirect |rapidity| along this direction')

    rotate = sub.add_parser('rotate', help='Rotation from three angles')
    rotate.add_argument('angles', type=float, nargs=3)

    classify = sub.add_parser('classify', help='Validate and classify a 4x4 matrix')
    classify.add_argument('entries', type=float, nargs=16, help='Matrix entries, row-major')

    sub.add_parser('verify', help='Check closure and the Jacobi identity of so(3,1)')

    spinor = sub.add_parser('spinor', help='SL(2,C) matrix for a boost or rotation')
    spinor.add_argument('kind', choices=['boost', 'rotation'])
    spinor.add_argument('parameters', type=float, nargs=3)
    spinor.add_argument('--vector', type=float, nargs=4, metavar=('T', 'X', 'Y', 'Z'),
                        help='4-vector to transform through X -> A X A^dagger')
    return parser


def run_command(service: KernelService, args: argparse.Namespace):
    if args.command == 'boost':
        return service.boost(BoostRequest(rapidity=args.rapidity, velocity=args.velocity,
                                          direction=args.direction))
    if args.command == 'rotate':
        return service.rotate(RotationRequest(angles=args.angles))
    if args.command == 'classify':
        rows = [args.entries[i:i + 4] for i in range(0, 16, 4)]
        return service.classify(ClassifyRequest(matrix=rows))
    if args.command == 'verify':
        return service.verify_algebra()
    if args.command == 'spinor':
        return service.spinor(SpinorRequest(kind=args.kind, parameters=args.parameters,
                                            vector=args.vector))
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level or 'INFO'),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = load_config(args.config)
    if args.log_level:
        config['log_level'] = args.log_level
    if args.audit:
        config['audit'] = True

    try:
        cfg = KernelConfig(**config)
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_CONFIG

    service = KernelService(cfg)
    try:
        result = run_command(service, args)
    except SuperluminalVelocityError as e:
        logger.error(f"Domain error: {e}")
        return EXIT_DOMAIN
    except ValidationError as e:
        logger.error(f"Invalid request: {e}")
        return EXIT_CONFIG
    except ValueError as e:
        logger.error(f"Invalid arguments: {e}")
        return EXIT_CONFIG

    output = {args.command: result.model_dump()}
    if cfg.audit:
        output['audit'] = service.audit_summary()
    print(json.dumps(output, indent=2))
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
