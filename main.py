""" Square markers
    See markers.py for the marker structure and the available profiles.
    A marker encodes a small number (up to 30 bits depending on its profile) as a square of cells,
    protected by a Hamming code that corrects any single cell error.

    Drawing: painter.render(profile, value, pixel_size) makes an image with the marker in it,
             or encoder.encode(profile, value, paint) for anything else that can paint cells.
    Reading: recognizer.recognize(profile, image, **options) finds and decodes every marker in an image.

    The recognizer only copes with markers that are upright and square on to the camera.
"""

import random

import const
import canvas
import markers
import painter
import recognizer
import sampler
import utils

def _test(profile_name, values, logger, pixel_size=6, noise=0):
    """ draw the given values as markers down the diagonal of an image, then find them again """
    logger.push(profile_name, profile_name)
    logger.log('')
    logger.log('Drawing {} markers {}...'.format(profile_name, values))
    profile = markers.lookup(profile_name)
    step = profile.width * pixel_size
    image = canvas.new(step * len(values), step * len(values), const.WHITE)
    for index, value in enumerate(values):
        renderer = painter.Renderer(profile_name, position_x=index * step, position_y=index * step,
                                    pixel_size=pixel_size)
        renderer.render(value, image)
    for _ in range(noise):
        # sprinkle some grey specks about
        x = random.randrange(0, step * len(values))
        y = random.randrange(0, step * len(values))
        canvas.putpixel(image, x, y, const.GREY)
    logger.draw(image, file='markers')

    result = recognizer.recognize(profile_name, image, logger,
                                  provide_area=True, provide_errors=True, provide_grid=True, provide_timing=True)
    for marker in result['markers']:
        logger.log('  {} at {}{}'.format(marker['value'], utils.show_area(marker['area']),
                                         ' (with errors)' if marker['errors'] else ''))
        logger.draw(sampler.draw_grid(marker['grid']), folder=utils.image_folder(target=(marker['area']['x'],
                                                                                         marker['area']['y'])),
                    file='grid-{}'.format(marker['value']))
    boxes = canvas.copy(image)
    for marker in result['markers']:
        area = marker['area']
        boxes = canvas.rectangle(boxes, (area['x'] - 1, area['y'] - 1),
                                 (area['x'] + area['w'], area['y'] + area['h']), const.GREEN)
    logger.draw(boxes, file='found')
    found = sorted(set(marker['value'] for marker in result['markers']))
    if found == sorted(values):
        logger.log('All {} found'.format(len(values)))
    else:
        logger.log('Expected {}, found {}'.format(sorted(values), found))
    logger.log('Timing: {} ms (steps {})'.format(utils.show_number(result['timing']['total']),
                                                 [utils.show_number(step) for step in result['timing']['step']]))
    for marker in result['markers']:
        del marker['grid']  # images are already drawn
    logger.save(result, file='result')
    logger.pop()
    return result


if __name__ == "__main__":
    """ test harness """

    TEST_MARKERS = 3  # how many markers to draw per profile

    logger = utils.Logger('markers.log', 'markers')
    for profile in markers.PROFILES.values():
        values = [random.randrange(0, profile.payload_range) for _ in range(TEST_MARKERS)]
        _test(profile.name, values, logger, noise=20)
    logger.log('')
    logger.log('Done')
    logger.close()
