import os
import json
import sys

from pf2statblock.adapters import load_adapter
from pf2statblock.classify import classify_fragment, GENERIC_TRAIT
from pf2statblock.errors import error_record, is_error_record
from pf2statblock.readiness import ReadinessWaiter
from pf2statblock.record import RecordAssembler, new_record
from pf2statblock.schema import validate_record
from pf2statblock.sections import parse_section
from universal.creatures import write_creature
from universal.files import makedirs
from universal.options import exec_main, option_parser
from universal.utils import log_element


def parse_creature(filename, options):
    basename = os.path.basename(filename)
    if not options.stdout:
        sys.stderr.write("%s\n" % basename)
    with open(filename) as fp:
        page = fp.read()
    adapter = load_adapter(page, options.base_url)
    unclassified = None
    if options.log_unclassified:
        unclassified = log_element("unclassified.log")
    struct = extract_stats(
        adapter,
        max_attempts=options.attempts,
        interval=options.interval,
        on_unclassified=unclassified)
    if is_error_record(struct):
        sys.stderr.write("%s: %s\n" % (basename, struct['error']))
    if not options.skip_schema:
        validate_record(struct)
    if not options.dryrun:
        jsondir = makedirs(options.output, "creatures")
        write_creature(jsondir, struct, basename)
    elif options.stdout:
        print(json.dumps(struct, indent=2))
    return struct


def extract_stats(adapter, max_attempts=None, interval=None, sleep=None,
                  clock=None, cancel_token=None, on_unclassified=None,
                  now=None):
    """Runs one extraction against a source adapter.

    Returns the StatRecord, or an error record when the page never became
    ready, its data is missing or unrecognized, or parsing blew up.
    """
    try:
        wait_for_content(
            adapter, max_attempts=max_attempts, interval=interval,
            sleep=sleep, clock=clock, cancel_token=cancel_token)
        return build_record(adapter, on_unclassified, now)
    except Exception as e:
        return error_record(e)


def wait_for_content(adapter, max_attempts=None, interval=None, sleep=None,
                     clock=None, cancel_token=None):
    kwargs = {}
    if max_attempts is not None:
        kwargs['max_attempts'] = max_attempts
    if interval is not None:
        kwargs['interval'] = interval
    if sleep is not None:
        kwargs['sleep'] = sleep
    if clock is not None:
        kwargs['clock'] = clock
    waiter = ReadinessWaiter(
        adapter.is_ready, cancel_token=cancel_token, **kwargs)
    return waiter.wait()


def build_record(adapter, on_unclassified=None, now=None):
    assembler = RecordAssembler(new_record(now))
    assembler.apply_header(adapter.header())
    for fragment in adapter.fragments():
        kind = classify_fragment(fragment)
        if kind == GENERIC_TRAIT and on_unclassified:
            on_unclassified(fragment)
        assembler.apply(parse_section(kind, fragment), fragment)
    return assembler.finish()


def main():
    usage = "usage: %prog [options] [filenames]\nExtracts creature stat records from saved creature pages"
    parser = option_parser(usage)
    (options, args) = parser.parse_args()
    if not args:
        parser.print_help()
        sys.exit(1)
    exec_main(options, args, parse_creature)
