import logging
import typing
import mido

logger = logging.getLogger(__name__)

def list_input_devices() -> typing.List[str]:
    """
    Return the names of all available MIDI input ports.

    Backend failures are logged and reported as an empty list.
    """
    try:
        return list(mido.get_input_names())

    except Exception as e:
        logger.error(f"Failed to list MIDI inputs: {e}")
        return []


def select_input_device(device_name: typing.Optional[str] = None, callback: typing.Optional[typing.Callable] = None) -> typing.Tuple[typing.Optional[str], typing.Optional[typing.Any]]:
    """
    Select and open a MIDI input device.

    If `device_name` is None, the first available input is opened.
    If `device_name` is given but not found, this function falls back to the first
    available input and logs a warning, which keeps configs portable between machines.
    If no inputs exist at all, logs an error and returns None.

    `callback` is invoked by mido on its own thread for every incoming message.

    Returns:
        A tuple of (device_name, midi_in_object) or (None, None) on failure.
    """
    try:
        inputs = mido.get_input_names()
        logger.info(f"Available MIDI inputs: {inputs}")

        if not inputs:
            logger.error("No MIDI input devices found.")
            return None, None

        target = device_name

        if target is None:
            target = inputs[0]
            logger.info(f"No MIDI input requested - using '{target}'")

        elif target not in inputs:
            logger.warning(f"MIDI input device '{target}' not found.")
            target = inputs[0]
            logger.warning(f"Fallback to: {target}")

        midi_in = mido.open_input(target, callback=callback)
        logger.info(f"Opened MIDI input: {target}")
        return target, midi_in

    except Exception as e:
        logger.error(f"Failed to open MIDI input: {e}")
        return None, None
