import argparse
import logging
import sys
import typing

import midiascii.app
import midiascii.colors
import midiascii.config
import midiascii.midi_utils


logger = logging.getLogger(__name__)


def _build_parser () -> argparse.ArgumentParser:

	parser = argparse.ArgumentParser(
		prog="midi-ascii-art",
		description="Generate ASCII art patterns when MIDI keys are pressed",
	)
	parser.add_argument("-c", "--columns", default=None, help="Number of columns (default: terminal width)")
	parser.add_argument("-r", "--rows",    default=None, help="Number of rows (default: terminal height - 2)")
	parser.add_argument("--color",         default=None, help=f"Colour for the art, one of {', '.join(midiascii.colors.COLOR_NAMES)} or 'random' (default: white)")
	parser.add_argument("-d", "--device",  default=None, help="MIDI input device name (default: first available)")
	parser.add_argument("--config",        default=midiascii.config.DEFAULT_CONFIG_PATH, help="YAML config file (default: config.yaml)")
	parser.add_argument("--list-devices",  action="store_true", help="List MIDI inputs and exit")
	return parser


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the midi-ascii-art command.

	Returns the process exit status.
	"""

	logging.basicConfig(level=logging.INFO)

	args = _build_parser().parse_args(argv)

	if args.list_devices:
		inputs = midiascii.midi_utils.list_input_devices()
		if not inputs:
			logger.error("No MIDI input devices found.")
			return 1
		for i, name in enumerate(inputs, 1):
			print(f"  {i}. {name}")
		return 0

	try:
		file_config = midiascii.config.load_config(args.config)
		config = midiascii.config.build_config(
			file_config,
			columns = args.columns,
			rows = args.rows,
			color = args.color,
			device_name = args.device,
		)
	except midiascii.config.ConfigError as e:
		logger.error(str(e))
		return 1

	logger.info("midi-ascii-art starting...")

	app = midiascii.app.NoteArtApp(config)

	if not app.start():
		logger.error("Could not open a MIDI input.")
		return 1

	app.run()
	return 0


if __name__ == "__main__":
	sys.exit(main())
