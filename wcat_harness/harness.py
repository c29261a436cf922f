"""harness.py — wiring for one test run."""

from .build import ensure_built
from .catalog import build_registry
from .compare import Comparator
from .fifo import FifoSynchronizer, make_fifo
from .fixtures import Fixtures
from .runner import ProcessRunner


class Harness:
    """Everything a case needs: fixtures, runner, FIFO driver, comparator."""

    def __init__(self, config, fixtures):
        self.config = config
        self.fixtures = fixtures
        self.runner = ProcessRunner(config)
        self.fifo = FifoSynchronizer(self.runner)
        self.comparator = Comparator(config, self.runner, self.fifo, fixtures)

    @property
    def subject(self):
        return self.config.subject

    @property
    def reference(self):
        return self.config.reference

    @property
    def identity(self):
        return str(self.config.reference)

    def make_fifo(self, path):
        return make_fifo(path)

    def run_subject(self, args, stdin=None):
        return self.runner.run(self.subject, args, stdin, identity=self.identity)

    def run_reference(self, args, stdin=None):
        return self.runner.run(self.reference, args, stdin)

    def subject_to_file(self, args, output_path, stdin=None):
        return self.runner.run_to_file(self.subject, args, output_path, stdin,
                                       identity=self.identity)

    def reference_to_file(self, args, output_path, stdin=None):
        return self.runner.run_to_file(self.reference, args, output_path, stdin)


def run_tests(config, name_filter=None, registry=None):
    """Build if needed, provision fixtures, run the registry, clean up."""
    if registry is None:
        registry = build_registry()
    ensure_built(config)
    with Fixtures.provision() as fixtures:
        harness = Harness(config, fixtures)
        return registry.execute(harness, name_filter)
