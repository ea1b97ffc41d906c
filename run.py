import logging
import os
import sys as sys

import da
import logger as logger_lib
import plot
import report

log = logging.getLogger("admatch.run")

USAGE = "Usage: {} advertisers_file people_file [output_name]"


def main(argv):
    logger_lib.get_logger(level=os.environ.get("ADMATCH_LOG_LEVEL", "INFO"))

    if len(argv) < 3 or len(argv) > 4:
        print(USAGE.format(argv[0] if argv else "run.py"), file=sys.stderr)
        return 2

    advertisers_path, people_path = argv[1], argv[2]
    output_name = argv[3] if len(argv) == 4 else None

    names = []
    for path in (advertisers_path, people_path):
        try:
            names.append(report.read_names(path))
        except OSError as e:
            log.error("cannot read input file %s: %s", path, e.strerror)
            return 1
        except UnicodeDecodeError as e:
            log.error("input file %s is not valid UTF-8: %s", path, e.reason)
            return 1
    advertisers, people = names

    log.debug("%d advertisers, %d people", len(advertisers), len(people))

    matching = da.Matching(people, advertisers)
    _, total = matching.run()
    report.print_result(matching, total)

    if output_name is not None:
        try:
            report.serialize(matching, total, output_name)
            plot.save_pdf(matching, output_name + ".pdf")
        except OSError as e:
            log.error("cannot write results to %s: %s", output_name, e)
            return 1
        log.info("results saved to %s.csv, %s.json and %s.pdf",
                 output_name, output_name, output_name)

    return 0


def cli():
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
