""" Random useful stuff """

import os
import pathlib
import pickle
import time
import dill
import canvas

class Logger:
    """ crude logging system that saves to a file and prints to the console """

    def __init__(self, log_file: str, folder: str='.', context: str=None, prefix='  '):
        # make sure the destination folder exists
        pathlib.Path(folder).mkdir(parents=True, exist_ok=True)
        self.log_file = '{}/{}'.format(folder, log_file)
        self.log_handle = None
        if context is None:
            pathname, _ = os.path.splitext(log_file)
            _, context = os.path.split(pathname)
        self.context: [(str, str)] = [(context, folder)]
        self.prefix = prefix  # when logging multi-line messages prefix all lines except the first with this
        self.count = 0  # incremented for every anonymous draw call and used as a file name suffix
        self.log('open {}'.format(self.log_file))

    def __del__(self):
        self.close()

    def close(self):
        if self.log_handle is not None:
            self.log_handle.close()
            self.log_handle = None

    def log(self, msg: str=None):
        if msg is None:
            return
        if self.log_handle is None:
            self.log_handle = open(self.log_file, 'w')
        if msg == '\n':
            # caller just wants a blank line
            lines = ['']
        else:
            lines = msg.split('\n')
        for line, text in enumerate(lines):
            if line > 0:
                prefix = self.prefix
            else:
                prefix = ''
            log_msg = '{}: {}{}'.format(self.context[0][0], prefix, text)
            self.log_handle.write('{}\n'.format(log_msg))
            self.log_handle.flush()
            print(log_msg)

    def push(self, context=None, folder=None):
        parent_context = self.context[0][0]
        parent_folder  = self.context[0][1]
        if context is not None:
            parent_context = '{}/{}'.format(parent_context, context)
        if folder is not None:
            parent_folder = '{}/{}'.format(parent_folder, folder)
        self.context.insert(0, (parent_context, parent_folder))

    def pop(self):
        self.context.pop(0)

    def depth(self):
        return len(self.context)

    def draw(self, image, folder='', file='', ext='png', prefix=''):
        """ unload the given image into the given folder and file,
            folder, iff given, is a sub-folder to save it in (its created as required),
            the parent folder is that given when the logger was created,
            file is the file name to use, blank==invent one,
            returns the fully qualified file name used
            """
        filename = self.makepath(folder, file, ext)
        canvas.unload(image, filename)
        self.log('{}{}: image saved as: {}'.format(prefix, file, filename))
        return filename

    def makepath(self, folder='', file='', ext='png'):
        """ make the required folder and return the fully qualified file name """
        if file == '':
            file = 'logger-{}'.format(self.count)
            self.count += 1
        if folder == '':
            folder = self.context[0][1]
        else:
            folder = '{}/{}'.format(self.context[0][1], folder)
        # make sure the destination folder exists
        pathlib.Path(folder).mkdir(parents=True, exist_ok=True)
        return '{}/{}.{}'.format(folder, file, ext)

    def save(self, object, folder='', file='', ext='object'):
        """ save the given object to the given file (so it can be restored later),
            returns the fully qualified file name used
            """
        filename = self.makepath(folder, file, ext)
        with open(filename, 'wb') as dump_file:
            dill.dump(object, dump_file)
        self.log('{}: object saved as: {}'.format(file, filename))
        return filename

    def restore(self, folder='', file='', ext='object', filename=None):
        """ restore a previously saved object, returning the object or None if it does not exist,
            NB: the logger context must be the same as when the object was saved if no filename is given
            """
        if filename is None:
            filename = self.makepath(folder, file, ext)
        try:
            with open(filename, 'rb') as dump_file:
                object = dill.load(dump_file)
            self.log('Restored object from {}'.format(filename))
        except (OSError, EOFError, pickle.UnpicklingError):
            object = None
            self.log('Restore of object from {} failed'.format(filename))
        return object

class Timer:
    """ accumulate elapsed milliseconds for a sequence of steps,
        a disabled timer does nothing (so callers need not check)
        """

    def __init__(self, enabled=True):
        self.enabled = enabled
        self.steps   = []    # elapsed milliseconds of each completed step
        self.started = None  # perf counter at the start of the current step

    def start(self):
        if self.enabled:
            self.started = time.perf_counter()

    def stop(self):
        if self.enabled and self.started is not None:
            self.steps.append((time.perf_counter() - self.started) * 1000)
            self.started = None

    def total(self):
        return sum(self.steps)

    def timing(self):
        return {'total': self.total(), 'step': list(self.steps)}

def image_folder(source=None, target=(0,0)):
    """ build folder name for diagnostic images for the given target """
    if target[0] > 0 and target[1] > 0:
        # use a sub-folder for this image
        folder = '{:.0f}x{:.0f}y'.format(target[0], target[1])
    else:
        folder = ''
    if source is not None:
        # construct parent folder to save images in for this source
        pathname, _ = os.path.splitext(source)
        _, basename = os.path.split(pathname)
        folder = '{}{}'.format(basename, folder)
    return folder

def show_number(number, how='{:.2f}'):
    if number is None:
        return 'None'
    else:
        return how.format(number)

def show_area(area):
    return '{}x{}y {}w x {}h'.format(area['x'], area['y'], area['w'], area['h'])

def slices(length: int, count: int) -> [int]:
    """ split length into count near equal integer parts,
        returns the count+1 part boundaries, the first is 0 and the last is length
        """
    part = length / count
    boundaries = [0]
    for i in range(1, count):
        boundaries.append(int(round(i * part)))
    boundaries.append(length)
    return boundaries

def within(a, b, tolerance, minimum) -> bool:
    """ determine if the two given lengths are the same within the given fraction of their average,
        the allowed difference is never less than minimum
        """
    return abs(a - b) < max(((a + b) / 2) * tolerance, minimum)
