"""fifo.py — feed a named pipe from a background producer.

The producer opens the FIFO for writing, which blocks until the reader
process opens it, then writes each chunk in order. It is always joined once
the reader has exited and any write error is re-raised in the caller.
"""

import errno
import os
import threading
import time

from .errors import FifoError


def make_fifo(path, mode=0o644):
    try:
        os.mkfifo(path, mode)
    except OSError as e:
        raise FifoError(f"cannot create fifo {path}: {e}") from e
    return path


def _write_all(fd, data):
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


class FifoProducer(threading.Thread):
    """Writes chunks into a FIFO, sleeping `delay` between them."""

    def __init__(self, path, chunks, delay=0.0):
        super().__init__(name=f"fifo-producer:{os.path.basename(path)}", daemon=True)
        self.path = path
        self.chunks = [bytes(c) for c in chunks]
        self.delay = delay
        self.opened = threading.Event()
        self.error = None

    def run(self):
        try:
            fd = os.open(self.path, os.O_WRONLY)
        except OSError as e:
            self.error = e
            return
        self.opened.set()
        try:
            for index, chunk in enumerate(self.chunks):
                if index and self.delay:
                    time.sleep(self.delay)
                _write_all(fd, chunk)
        except OSError as e:
            self.error = e
        finally:
            os.close(fd)

    def release(self):
        """Unblock a producer whose reader exited without opening the FIFO.

        Opens the read end ourselves and discards whatever is written until
        the producer is done.
        """
        if self.opened.is_set() or not self.is_alive():
            return
        try:
            fd = os.open(self.path, os.O_RDONLY | os.O_NONBLOCK)
        except FileNotFoundError:
            # the producer fails the same way and reports it from finish()
            return
        try:
            while self.is_alive():
                try:
                    os.read(fd, 65536)
                except OSError as e:
                    if e.errno != errno.EAGAIN:
                        raise
                self.join(0.01)
        finally:
            os.close(fd)

    def finish(self):
        self.release()
        self.join()
        if self.error is not None:
            raise FifoError(f"writing to fifo {self.path} failed: {self.error}") from self.error


class FifoSynchronizer:
    """Runs a reader process against a FIFO fed by a FifoProducer."""

    def __init__(self, runner):
        self.runner = runner

    def _with_producer(self, fifo, chunks, delay, run):
        producer = FifoProducer(str(fifo), chunks, delay)
        producer.start()
        try:
            result = run()
        except BaseException:
            producer.release()
            producer.join()
            raise
        producer.finish()
        return result

    def run(self, executable, fifo, options, chunks, delay=0.0, identity=None):
        """Run `executable [options] fifo` while the producer feeds the FIFO."""
        args = [*options, str(fifo)]
        return self._with_producer(
            fifo, chunks, delay,
            lambda: self.runner.run(executable, args, identity=identity))

    def run_to_file(self, executable, fifo, options, chunks, output_path,
                    delay=0.0, identity=None):
        args = [*options, str(fifo)]
        return self._with_producer(
            fifo, chunks, delay,
            lambda: self.runner.run_to_file(executable, args, output_path,
                                            identity=identity))
