import argparse
import sys
import threading
from a11ytoolbar.common.task import *
from a11ytoolbar.utils.log_util import setup_logging
from a11ytoolbar.view.accessibility import *
from a11ytoolbar.view.document import *
from a11ytoolbar.view.speech import *
from a11ytoolbar.view.toolbar import *

def build_parser():
    parser = argparse.ArgumentParser(
        prog="a11ytoolbar",
        description="Read an HTML page aloud the way the accessibility toolbar does.")
    parser.add_argument("page", help="path to an HTML file")
    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument("--describe", metavar="SELECTOR",
        help="speak the point-read label of the first matching element")
    action.add_argument("--from", dest="start", metavar="SELECTOR",
        help="hover the first matching element in continuous mode")
    action.add_argument("--read-all", action="store_true",
        help="read the main content region from the top")
    parser.add_argument("--engine", choices=["print", "gtts"], default="print")
    parser.add_argument("--lang", default="en")
    parser.add_argument("--rate", type=float, default=1)
    parser.add_argument("--volume", type=float, default=.7)
    parser.add_argument("--log-level", default="WARNING")
    return parser

def make_synthesizer(engine, task_runner):
    if engine == "gtts":
        from a11ytoolbar.view.gtts_synthesizer import GTTSSynthesizer
        return GTTSSynthesizer(task_runner)
    return PrintSynthesizer(task_runner)

def run(args, task_runner):
    document = Document.from_file(args.page)
    document.render()
    finished = threading.Event()
    options = {
        "speech": {"lang": args.lang},
        "defaults": {"speech_volume": args.volume, "speech_rate": args.rate},
    }
    toolbar = AccessibilityToolbar(
        document, make_synthesizer(args.engine, task_runner), task_runner, options)

    def done():
        task_runner.call_soon(finished.set)

    def start():
        if args.describe:
            node = document.query_selector(args.describe)
            if node is None:
                print("No element matches", args.describe, file=sys.stderr)
                finished.set()
                return
            text = describe_with_type(node) or describe(node)
            if not text:
                print("Nothing to describe for", args.describe, file=sys.stderr)
                finished.set()
                return
            toolbar.speak(text, done)
        elif args.start:
            node = document.query_selector(args.start)
            if node is None:
                print("No element matches", args.start, file=sys.stderr)
                finished.set()
                return
            toolbar.dispatcher.set_mode(NarrationMode.CONTINUOUS)
            toolbar.handle_pointer_over(node)
            task_runner.call_later(CONTINUOUS_DELAY_SEC + .1, wait_for_speech)
        else:
            toolbar.dispatcher.set_mode(NarrationMode.CONTINUOUS)
            toolbar.read_page()
            wait_for_speech()

    def wait_for_speech():
        if toolbar.is_reading():
            task_runner.call_later(.1, wait_for_speech)
        else:
            toolbar.detach()
            finished.set()

    task_runner.call_soon(start)
    return finished

def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging("a11ytoolbar", args.log_level)
    task_runner = TaskRunner()
    task_runner.start_thread()
    try:
        finished = run(args, task_runner)
        finished.wait()
    except OSError as e:
        print("Cannot read", args.page, ":", e, file=sys.stderr)
        return 1
    finally:
        task_runner.set_needs_quit()
    return 0

if __name__ == "__main__":
    sys.exit(main())
