"""Console application that reports how its own command line was classified.

Usage::

    consoleapp-inspect -vf out.txt --mode=fast input1 input2
    consoleapp-inspect --format=yaml -abc
"""

import json

import yaml

from consoleapp.cli.application import ConsoleApplication
from consoleapp.cli.utils import create_application_entry_point
from consoleapp.utils.logging_config import LoggerAdapter

OUTPUT_FORMAT_PARAM = "format"
OUTPUT_FORMATS = ("json", "yaml")


class InspectArgsApplication(ConsoleApplication):
    """Print the switches, parameters and values parsed from the command line."""

    def render(self) -> str:
        """
        Render the classified arguments in the requested output format.

        :return: JSON (default) or YAML document
        :rtype: str
        :raises ValueError: If the ``format`` parameter names an unknown format
        """
        output_format = self.get_param(OUTPUT_FORMAT_PARAM) or "json"
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unsupported output format '{output_format}', "
                f"expected one of {', '.join(OUTPUT_FORMATS)}"
            )

        log = LoggerAdapter(self.logger, {"format": output_format})
        log.debug("Rendering %d argument token(s)", len(self.args or ()))

        report = self.state.to_dict()
        if output_format == "yaml":
            return yaml.safe_dump(report, sort_keys=False)
        return json.dumps(report, indent=2)

    def run(self) -> int | None:
        print(self.render())
        return None


main = create_application_entry_point(InspectArgsApplication)


if __name__ == "__main__":
    main()
