import datetime

import jinja2

env = jinja2.Environment(
    loader=jinja2.PackageLoader('imgdrop', 'templates'),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def strftime(timestamp, date_format):
    return datetime.datetime.fromtimestamp(timestamp).strftime(date_format)


env.filters['strftime'] = strftime


def render_listing(images, date_format):
    template = env.get_template('listing.html')
    return template.render(images=images, date_format=date_format)


def render_error(code, reason, message):
    template = env.get_template('error.html')
    return template.render(code=code, reason=reason, message=message)
