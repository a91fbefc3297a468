"""Tests for the logger, timer and numeric helpers."""

import os

import const
import canvas
import utils


def test_logger_writes_context(tmp_path):
    logger = utils.Logger('test.log', str(tmp_path))
    logger.log('hello')
    logger.push('inner')
    logger.log('first\nsecond')
    assert logger.depth() == 2
    logger.pop()
    logger.log(None)
    logger.close()
    lines = (tmp_path / 'test.log').read_text().splitlines()
    assert lines[1:] == ['test: hello', 'test/inner: first', 'test/inner:   second']


def test_logger_draw(tmp_path):
    logger = utils.Logger('test.log', str(tmp_path))
    filename = logger.draw(canvas.new(8, 6, const.RED), folder='images', file='red')
    logger.close()
    assert filename == '{}/images/red.png'.format(tmp_path)
    assert canvas.size(canvas.load(filename)) == (8, 6)


def test_logger_makepath_invents_names(tmp_path):
    logger = utils.Logger('test.log', str(tmp_path))
    first = logger.makepath()
    second = logger.makepath()
    logger.close()
    assert first != second
    assert os.path.dirname(first) == str(tmp_path)


def test_logger_save_restore(tmp_path):
    logger = utils.Logger('test.log', str(tmp_path))
    result = {'markers': [{'value': 300, 'area': {'x': 20, 'y': 20, 'w': 80, 'h': 80}}]}
    logger.save(result, file='result')
    assert logger.restore(file='result') == result
    assert logger.restore(file='missing') is None
    logger.close()


def test_timer():
    timer = utils.Timer()
    timer.start()
    timer.stop()
    timer.stop()  # not started, ignored
    timer.start()
    timer.stop()
    timing = timer.timing()
    assert len(timing['step']) == 2
    assert all(step >= 0 for step in timing['step'])
    assert timing['total'] == sum(timing['step'])


def test_disabled_timer():
    timer = utils.Timer(False)
    timer.start()
    timer.stop()
    assert timer.timing() == {'total': 0, 'step': []}


def test_within():
    assert utils.within(100, 109, 0.1, 1)
    assert not utils.within(100, 112, 0.1, 1)
    assert utils.within(8, 8, 0.1, 1)
    assert not utils.within(8, 9, 0.1, 1)


def test_show():
    assert utils.show_number(None) == 'None'
    assert utils.show_number(1.234) == '1.23'
    assert utils.show_area({'x': 1, 'y': 2, 'w': 3, 'h': 4}) == '1x2y 3w x 4h'
    assert utils.image_folder(target=(20, 30)) == '20x30y'
    assert utils.image_folder('photos/test.png') == 'test'
