# -*- coding: utf-8 -*-
"""The samplers command. Sampler subcommands write values, one per
line. Everything else reads values, one per line, and writes a report.
Since both ends speak the same format, they chain:

    samplers gaussian -N 1000 | samplers histogram | samplers mean
"""

import sys
import argparse

from samplers import __version__
from samplers import distributions
from samplers.context import get_context, note, StderrNoteHandler
from samplers.moment import MomentAccumulator
from samplers.histogram import HistogramBinner, BoundedHistogramBinner
from samplers.render import render_summary, render_histogram
from samplers.stream import (StreamReader,
                             StreamWriter,
                             ParseError,
                             StreamClosed,
                             get_sys_stream,
                             silence_stdout)
from samplers.common import (DEFAULT_NUM_EXPERIMENTS,
                             DEFAULT_DISPLAY_SIZE,
                             DEFAULT_MAX_BUCKETS,
                             DEFAULT_BOUNDED_BUCKETS,
                             ECHO_MODES,
                             VARIANCE_TYPES,
                             UNIFORM_TYPES)

READS_STDIN = 'This reads from stdin. You can terminate stdin with CTRL+D.'


def _positive_int(text):
    try:
        ret = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError('expected an integer, not %r' % text)
    if ret < 1:
        raise argparse.ArgumentTypeError('expected a positive integer,'
                                         ' not %r' % ret)
    return ret


def _non_negative_int(text):
    if text.strip() == '0':
        return 0
    return _positive_int(text)


def _is_negative_number(text):
    if not text.startswith('-'):
        return False
    try:
        float(text)
    except ValueError:
        return False
    return True


def join_negative_values(argv):
    """argparse only takes plain negatives like -5 or -0.5 as option
    values. Anything else, like -1e3 or -inf, reads as an unknown
    option. Attaching such values to the flag before them, as in
    ``--min=-1e3``, gets them through.
    """
    ret = []
    for arg in argv:
        prev = ret[-1] if ret else ''
        if (_is_negative_number(arg) and prev.startswith('-')
                and '=' not in prev and not _is_negative_number(prev)):
            ret[-1] = '%s=%s' % (prev, arg)
        else:
            ret.append(arg)
    return ret


def _emit_samples(args, samples, stdout):
    writer = StreamWriter(stdout)
    for val in distributions.take(samples, args.num_experiments):
        writer.write_value(val)
    return 0


def gaussian(args, stdin, stdout, stderr):
    rng = distributions.get_rng(args.seed)
    samples = distributions.gaussian(rng, args.mean, args.variance)
    return _emit_samples(args, samples, stdout)


def poisson(args, stdin, stdout, stderr):
    rng = distributions.get_rng(args.seed)
    return _emit_samples(args, distributions.poisson(rng, args.lam), stdout)


def exponential(args, stdin, stdout, stderr):
    rng = distributions.get_rng(args.seed)
    samples = distributions.exponential(rng, args.lam)
    return _emit_samples(args, samples, stdout)


def uniform(args, stdin, stdout, stderr):
    rng = distributions.get_rng(args.seed)
    if args.type == 'discrete':
        samples = distributions.discrete_uniform(rng, args.lower, args.upper)
    else:
        samples = distributions.continuous_uniform(rng, args.lower, args.upper)
    return _emit_samples(args, samples, stdout)


def binomial(args, stdin, stdout, stderr):
    rng = distributions.get_rng(args.seed)
    samples = distributions.binomial(rng, args.num_trials, args.probability)
    return _emit_samples(args, samples, stdout)


def summarize(args, stdin, stdout, stderr):
    moments = MomentAccumulator().add_many(StreamReader(stdin))
    StreamWriter(stdout).write_lines(render_summary(moments))
    return 0


def mean(args, stdin, stdout, stderr):
    moments = MomentAccumulator().add_many(StreamReader(stdin))
    StreamWriter(stdout).write_value(moments.mean)
    return 0


def variance(args, stdin, stdout, stderr):
    moments = MomentAccumulator().add_many(StreamReader(stdin))
    if args.type == 'sample':
        ret = moments.variance
    else:
        ret = moments.pop_variance
    StreamWriter(stdout).write_value(ret)
    return 0


def _should_echo(echo, stdout):
    if echo == 'always':
        return True
    elif echo == 'never':
        return False
    isatty = getattr(stdout, 'isatty', None)
    return not (callable(isatty) and isatty())


def histogram(args, stdin, stdout, stderr):
    echo = _should_echo(args.echo, stdout)
    out = StreamWriter(stdout)
    reader = StreamReader(stdin)
    if args.min is not None and args.max is not None:
        note('histogram', 'bounds given, binning in a single pass')
        binner = BoundedHistogramBinner(args.min, args.max,
                                        args.num_buckets
                                        or DEFAULT_BOUNDED_BUCKETS)
        for val in reader:
            if echo:
                out.write_value(val)
            binner.add(val)
    else:
        # everything is read before anything is echoed, so that a
        # parse error leaves stdout untouched
        values = reader.read_all()
        if echo:
            for val in values:
                out.write_value(val)
        binner = HistogramBinner(num_buckets=args.num_buckets,
                                 max_buckets=args.max_buckets,
                                 lower=args.min,
                                 upper=args.max)
        binner.add_many(values)
    report_out = StreamWriter(stderr) if echo else out
    hist = binner.get_histogram()
    report_out.write_lines(render_histogram(hist, args.display_size))
    return 0


def _add_sampler_args(subprs, name, func, desc, **kw):
    ret = subprs.add_parser(name, help=desc, description=desc, **kw)
    ret.add_argument('-N', '--num-experiments', type=_non_negative_int,
                     default=DEFAULT_NUM_EXPERIMENTS,
                     help='The number of experiments to perform.'
                     ' (default: %(default)s)')
    ret.add_argument('--seed', type=int, default=None,
                     help='Seed for the random number generator,'
                     ' for reproducible output.')
    ret.set_defaults(func=func)
    return ret


def _add_stdin_command(subprs, name, func, desc, epilog=None):
    epilog = READS_STDIN + ('\n' + epilog if epilog else '')
    ret = subprs.add_parser(name, help=desc, description=desc, epilog=epilog,
                            formatter_class=argparse.RawDescriptionHelpFormatter)
    ret.set_defaults(func=func)
    return ret


def get_parser():
    prs = argparse.ArgumentParser(
        prog='samplers',
        description='Sample from common distributions and calculate'
        ' summary statistics from the command line.')
    prs.add_argument('--version', action='version',
                     version='%(prog)s ' + __version__)
    prs.add_argument('--verbose', action='store_true',
                     help='Write diagnostic notes to stderr.')
    subprs = prs.add_subparsers(dest='command', metavar='COMMAND')
    subprs.required = True

    sub = _add_sampler_args(subprs, 'gaussian', gaussian,
                            u'Sample from a normal distribution N(μ, σ²).')
    sub.add_argument('-m', '--mean', type=float, default=0.0,
                     help=u'The mean of the normal random variable, μ.')
    sub.add_argument('-v', '--variance', type=float, default=1.0,
                     help=u'The variance of the normal random variable, σ².')

    sub = _add_sampler_args(subprs, 'poisson', poisson,
                            u'Sample from a Poisson distribution Pois(λ).')
    sub.add_argument('-l', '--lambda', dest='lam', type=float, default=1.0,
                     help=u'The mean and variance of the Poisson random'
                     u' variable, λ.')

    sub = _add_sampler_args(subprs, 'exponential', exponential,
                            u'Sample from an exponential distribution Exp(λ).')
    sub.add_argument('-l', '--lambda', dest='lam', type=float, default=1.0,
                     help=u'The rate of the exponential random variable, λ.')

    sub = _add_sampler_args(subprs, 'uniform', uniform,
                            'Sample from a uniform distribution Uniform(a, b).',
                            epilog='A continuous uniform distribution is'
                            ' sampled over [lower, upper), while a discrete'
                            ' uniform distribution is sampled over {lower,'
                            ' lower+1, ..., upper}.')
    sub.add_argument('-a', '--lower', type=float, default=0.0,
                     help='The lower bound of the uniform random variable.')
    sub.add_argument('-b', '--upper', type=float, default=1.0,
                     help='The upper bound of the uniform random variable.')
    sub.add_argument('-t', '--type', choices=UNIFORM_TYPES,
                     default='continuous',
                     help='Whether to use a continuous or discrete uniform'
                     ' distribution. (default: %(default)s)')

    sub = _add_sampler_args(subprs, 'binomial', binomial,
                            'Sample from a binomial distribution Bin(n, p).')
    sub.add_argument('-n', '--num-trials', type=_non_negative_int, default=1,
                     help='The number of independent trials to perform.')
    sub.add_argument('-p', '--probability', type=float, default=0.5,
                     help='The probability of success for each trial.')

    _add_stdin_command(subprs, 'summarize', summarize,
                       'Calculate basic summary statistics.',
                       'Summary statistics are computed in a single pass'
                       ' with a constant amount of additional memory.')

    sub = _add_stdin_command(
        subprs, 'histogram', histogram,
        'Display a histogram of given values.',
        'When echoing, every input value is repeated on stdout and the\n'
        'histogram goes to stderr. By default, this happens when stdout\n'
        'is not a terminal. Without --min and --max, all values are held\n'
        'in memory until the end of input. With both, the histogram is\n'
        'computed in a single pass.')
    sub.add_argument('--min', type=float, default=None,
                     help='The lowest boundary in the histogram.')
    sub.add_argument('--max', type=float, default=None,
                     help='The highest boundary in the histogram.')
    sub.add_argument('-b', '--num-buckets', type=_positive_int, default=None,
                     help='The number of buckets in the histogram. (default:'
                     ' ceil(log2(count)) + 1, or %s with --min and --max)'
                     % DEFAULT_BOUNDED_BUCKETS)
    sub.add_argument('--max-buckets', type=_positive_int,
                     default=DEFAULT_MAX_BUCKETS,
                     help='The most buckets to pick when --num-buckets is'
                     ' not set. (default: %(default)s)')
    sub.add_argument('-d', '--display-size', type=_positive_int,
                     default=DEFAULT_DISPLAY_SIZE,
                     help='The width of the longest bar, in characters.'
                     ' (default: %(default)s)')
    sub.add_argument('--echo', choices=ECHO_MODES, default='auto',
                     help='Whether to repeat the input on stdout.'
                     ' (default: %(default)s)')

    _add_stdin_command(subprs, 'mean', mean,
                       'Calculate the mean of given values.')

    sub = _add_stdin_command(subprs, 'variance', variance,
                             'Calculate the variance of given values.')
    sub.add_argument('-t', '--type', choices=VARIANCE_TYPES,
                     default='population',
                     help='Whether to compute population variance or sample'
                     ' variance. (default: %(default)s)')
    return prs


def _complain(stderr, message):
    try:
        StreamWriter(stderr).write_line(u'samplers: %s' % (message,))
    except StreamClosed:
        pass


def main(argv=None, stdin=None, stdout=None, stderr=None):
    """Runs the samplers command and returns its exit status. The
    streams default to the binary buffers of the sys streams.
    """
    sys_stdout = stdout is None
    stdin = stdin if stdin is not None else get_sys_stream('stdin')
    stdout = stdout if stdout is not None else get_sys_stream('stdout')
    stderr = stderr if stderr is not None else get_sys_stream('stderr')

    if argv is None:
        argv = sys.argv[1:]
    args = get_parser().parse_args(join_negative_values(argv))

    note_handler = None
    if args.verbose:
        note_handler = StderrNoteHandler()
        get_context().add_note_handler(note_handler)
    try:
        return args.func(args, stdin, stdout, stderr)
    except ParseError as pe:
        _complain(stderr, pe)
        return 1
    except StreamClosed:
        if sys_stdout:
            silence_stdout()
        return 0
    except ValueError as ve:
        _complain(stderr, ve)
        return 1
    except KeyboardInterrupt:
        return 130
    finally:
        if note_handler:
            get_context().remove_note_handler(note_handler)


def console_main():
    sys.exit(main())
