import sys
import os
from optparse import OptionParser


def exec_main(options, args, function):
    if not options.output and not options.dryrun:
        sys.stderr.write("-o/--output required\n")
        sys.exit(1)
    if not options.dryrun and not os.path.exists(options.output):
        sys.stderr.write(
            "-o/--output points to a directory that does not exist\n")
        sys.exit(1)
    if not options.dryrun and not os.path.isdir(options.output):
        sys.stderr.write(
            "-o/--output points to a file, it must point to a directory\n")
        sys.exit(1)
    if options.attempts < 1:
        sys.stderr.write("-a/--attempts must be at least 1\n")
        sys.exit(1)
    if options.interval < 0:
        sys.stderr.write("-i/--interval must not be negative\n")
        sys.exit(1)
    results = []
    for arg in args:
        results.append(function(arg, options))
    return results


def option_parser(usage):
    parser = OptionParser(usage=usage)
    parser.add_option(
        "-o", "--output", dest="output",
        help="Output data directory. Records are written under <output>/creatures. (required)")
    parser.add_option(
        "-d", "--dry-run", dest="dryrun", default=False, action="store_true",
        help="Dry run (no actual output)")
    parser.add_option(
        "-k", "--skip-schema", dest="skip_schema", default=False, action="store_true",
        help="Skip schema validation")
    parser.add_option(
        "-s", "--stdout", dest="stdout", default=False, action="store_true",
        help="Write json to stdout")
    parser.add_option(
        "-b", "--base-url", dest="base_url", default=None,
        help="URL the page was saved from, used to resolve relative image paths")
    parser.add_option(
        "-a", "--attempts", dest="attempts", default=40, type="int",
        help="Readiness checks before giving up (default: 40)")
    parser.add_option(
        "-i", "--interval", dest="interval", default=0.25, type="float",
        help="Seconds between readiness checks (default: 0.25)")
    parser.add_option(
        "-l", "--log-unclassified", dest="log_unclassified", default=False,
        action="store_true",
        help="Append fragments that fall through to traits to unclassified.log")
    return parser
