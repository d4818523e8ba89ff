"""
Reusable UI components for the server-rendered pages.

Usage:
    {% load ui %}
    {% button "Donate" href=url variant="primary" %}
    {% progress_bar student.total_raised|progress:student.total_needed label="Funded" show_label=True %}
    {% badge "Urgent" variant="urgent" dot=True %}
    {% avatar name=donor.display_name src=donor.photo_url size="lg" %}
    {% avatar_group supporters max=4 size="sm" %}
    {% notification_badge unread_count %}
    {% skeleton_list count=5 %}
    {% card variant="elevated" %}...{% endcard %}
"""

from django import template
from django.utils.html import format_html, format_html_join
from django.utils.safestring import mark_safe

from apps.pages import formatting


register = template.Library()


def _classes(*parts):
    return ' '.join(part for part in parts if part)


# Button

BUTTON_VARIANTS = {'primary', 'secondary', 'outline', 'ghost', 'danger'}
BUTTON_SIZES = {'sm', 'md', 'lg'}


@register.simple_tag
def button(label, href=None, variant='primary', size='md', type='button',
           disabled=False, loading=False, full_width=False, css_class='', aria_label=None, name=None, value=None):
    """Render a link styled as a button when href is given, otherwise a <button>."""
    variant = variant if variant in BUTTON_VARIANTS else 'primary'
    size = size if size in BUTTON_SIZES else 'md'
    classes = _classes(
        'btn',
        f'btn--{variant}',
        f'btn--{size}',
        'btn--block' if full_width else '',
        'btn--loading' if loading else '',
        css_class,
    )
    text = 'Processing...' if loading else label

    if href and not (disabled or loading):
        return format_html(
            '<a href="{}" class="{}"{}>{}</a>',
            href, classes, _aria_label_attr(aria_label), text,
        )

    attrs = []
    if disabled or loading:
        attrs.append(mark_safe(' disabled aria-disabled="true"'))
    if loading:
        attrs.append(mark_safe(' aria-busy="true"'))
    if name:
        attrs.append(format_html(' name="{}"', name))
    if value is not None:
        attrs.append(format_html(' value="{}"', value))

    return format_html(
        '<button type="{}" class="{}"{}{}>{}</button>',
        type, classes, format_html_join('', '{}', ((a,) for a in attrs)),
        _aria_label_attr(aria_label), text,
    )


def _aria_label_attr(aria_label):
    if not aria_label:
        return ''
    return format_html(' aria-label="{}"', aria_label)


# Card

CARD_VARIANTS = {'elevated', 'outlined', 'filled'}


class CardNode(template.Node):
    def __init__(self, nodelist, kwargs):
        self.nodelist = nodelist
        self.kwargs = kwargs

    def render(self, context):
        options = {key: value.resolve(context) for key, value in self.kwargs.items()}
        variant = options.get('variant', 'elevated')
        variant = variant if variant in CARD_VARIANTS else 'elevated'
        classes = _classes(
            'card',
            f'card--{variant}',
            'card--interactive' if options.get('interactive') else '',
            options.get('css_class', ''),
        )
        tag = 'article' if options.get('as_article') else 'div'
        return format_html(
            '<{} class="{}">{}</{}>',
            tag, classes, self.nodelist.render(context), tag,
        )


@register.tag
def card(parser, token):
    """{% card variant="outlined" interactive=True %} ... {% endcard %}"""
    bits = token.split_contents()[1:]
    kwargs = template.base.token_kwargs(bits, parser)
    if bits:
        raise template.TemplateSyntaxError("'card' only accepts keyword arguments")
    nodelist = parser.parse(('endcard',))
    parser.delete_first_token()
    return CardNode(nodelist, kwargs)


# Input

@register.simple_tag
def input(field, label=None, helper_text='', css_class=''):
    """
    Render a bound form field with label, helper text and error message.

    Errors set aria-invalid and are linked through aria-describedby.
    """
    field_id = field.id_for_label or field.html_name
    helper_id = f'{field_id}-helper'
    error_id = f'{field_id}-error'
    errors = list(field.errors)

    described_by = []
    if helper_text:
        described_by.append(helper_id)
    if errors:
        described_by.append(error_id)

    attrs = {'class': _classes('input', 'input--error' if errors else '', css_class)}
    if errors:
        attrs['aria-invalid'] = 'true'
    if described_by:
        attrs['aria-describedby'] = ' '.join(described_by)
    if field.field.required:
        attrs['aria-required'] = 'true'

    helper_html = ''
    if helper_text:
        helper_html = format_html('<p id="{}" class="field__helper">{}</p>', helper_id, helper_text)

    error_html = ''
    if errors:
        error_html = format_html(
            '<p id="{}" class="field__error" role="alert">{}</p>', error_id, errors[0]
        )

    return format_html(
        '<div class="field"><label for="{}" class="field__label">{}</label>{}{}{}</div>',
        field_id,
        label if label is not None else field.label,
        field.as_widget(attrs=attrs),
        helper_html,
        error_html,
    )


# Progress

PROGRESS_VARIANTS = {'default', 'success', 'warning', 'error'}


def clamp_percentage(value, maximum=100):
    try:
        value = float(value)
        maximum = float(maximum)
    except (TypeError, ValueError):
        return 0
    if maximum <= 0:
        return 0
    return max(0.0, min(value / maximum * 100, 100.0))


@register.simple_tag
def progress_bar(value, max=100, label='', show_label=False, size='md', variant='default'):
    """Linear progress bar exposing role=progressbar with aria values."""
    percentage = clamp_percentage(value, max)
    rounded = round(percentage)
    variant = variant if variant in PROGRESS_VARIANTS else 'default'
    if percentage >= 100 and variant == 'default':
        variant = 'success'

    header = ''
    if label or show_label:
        header = format_html(
            '<div class="progress__header">{}{}</div>',
            format_html('<span class="progress__label">{}</span>', label) if label else '',
            format_html(
                '<span class="progress__value">{}%{}</span>',
                rounded, ' ✓' if percentage >= 100 else '',
            ) if show_label else '',
        )

    return format_html(
        '<div class="progress progress--{} progress--{}">{}'
        '<div class="progress__track" role="progressbar" aria-valuenow="{}" '
        'aria-valuemin="0" aria-valuemax="100" aria-label="{}">'
        '<div class="progress__fill" style="width: {}%"></div>'
        '</div></div>',
        size, variant, header, rounded, label or 'Progress', f'{percentage:.1f}',
    )


# Badge

BADGE_VARIANTS = {'urgent', 'high', 'medium', 'low', 'funded', 'active', 'pending', 'default'}


@register.simple_tag
def badge(text, variant='default', size='md', dot=False):
    variant = variant if variant in BADGE_VARIANTS else 'default'
    dot_html = ''
    if dot:
        dot_html = format_html('<span class="badge__dot badge__dot--{}" aria-hidden="true"></span>', variant)
    return format_html(
        '<span class="badge badge--{} badge--{}" role="status">{}{}</span>',
        variant, size, dot_html, text,
    )


NOTIFICATION_VARIANTS = {'primary', 'error', 'success', 'warning'}


@register.simple_tag
def notification_badge(count=0, max=99, show_zero=False, variant='error', dot=False):
    """Corner count bubble, "99+" past max. Renders nothing for zero unless show_zero."""
    count = int(count or 0)
    if count == 0 and not show_zero:
        return ''
    variant = variant if variant in NOTIFICATION_VARIANTS else 'error'

    if dot:
        return format_html(
            '<span class="notification-badge notification-badge--dot notification-badge--{}" aria-hidden="true"></span>',
            variant,
        )

    display = f'{max}+' if count > int(max) else str(count)
    return format_html(
        '<span class="notification-badge notification-badge--{}" role="status" aria-label="{} notifications">{}</span>',
        variant, display, display,
    )


# Avatar

AVATAR_SIZES = {'xs', 'sm', 'md', 'lg', 'xl', '2xl'}


@register.simple_tag
def avatar(name='', src='', alt='', size='md', shape='circle'):
    """Image avatar, or the name's initials when there is no image."""
    size = size if size in AVATAR_SIZES else 'md'
    display_alt = alt or name or 'User avatar'
    classes = _classes('avatar', f'avatar--{size}', f'avatar--{shape}')

    if src:
        return format_html(
            '<span class="{}"><img src="{}" alt="{}" class="avatar__image" loading="lazy"></span>',
            classes, src, display_alt,
        )

    initials = formatting.get_initials(name) if name else '?'
    return format_html(
        '<span class="{}"><span class="avatar__fallback" role="img" aria-label="{}">{}</span></span>',
        classes, display_alt, initials,
    )


def _person(item):
    if isinstance(item, dict):
        return item.get('name', ''), item.get('src', '')
    name = getattr(item, 'display_name', '') or getattr(item, 'full_name', '')
    return name, getattr(item, 'photo_url', '') or ''


@register.simple_tag
def avatar_group(people, max=5, size='md', shape='circle'):
    """
    Overlapping avatars for a list of people, then a "+N" avatar for the rest.

    Each item is a dict with name and src, or an object with
    display_name (or full_name) and photo_url.
    """
    people = list(people or [])
    limit = int(max) if max else len(people)
    shown = people[:limit]
    overflow = len(people) - len(shown)
    size = size if size in AVATAR_SIZES else 'md'

    items = []
    for index, item in enumerate(shown):
        name, src = _person(item)
        items.append(format_html(
            '<span class="avatar-group__item" style="z-index: {}">{}</span>',
            len(shown) - index, avatar(name=name, src=src, size=size, shape=shape),
        ))

    if overflow > 0:
        items.append(format_html(
            '<span class="{}"><span class="avatar__fallback" role="img" aria-label="{} more">+{}</span></span>',
            _classes('avatar', f'avatar--{size}', f'avatar--{shape}', 'avatar--overflow'),
            overflow, overflow,
        ))

    return format_html(
        '<div class="avatar-group">{}</div>',
        format_html_join('', '{}', ((item,) for item in items)),
    )


# Skeleton

SKELETON_VARIANTS = {'text', 'circular', 'rectangular', 'rounded'}


def _dimension(value):
    if value in (None, ''):
        return ''
    if isinstance(value, (int, float)):
        return f'{value}px'
    return str(value)


@register.simple_tag
def skeleton(variant='rectangular', width=None, height=None):
    """Decorative loading placeholder, hidden from assistive technology."""
    variant = variant if variant in SKELETON_VARIANTS else 'rectangular'
    styles = []
    if _dimension(width):
        styles.append(f'width: {_dimension(width)}')
    if _dimension(height):
        styles.append(f'height: {_dimension(height)}')
    return format_html(
        '<div class="skeleton skeleton--{}" style="{}" aria-hidden="true"></div>',
        variant, '; '.join(styles),
    )


@register.simple_tag
def skeleton_card(has_image=True, lines=3):
    """A loading card. The container announces busy state."""
    parts = []
    if has_image:
        parts.append(skeleton('rounded', height=192))
    parts.append(skeleton('text', width='60%'))
    for _ in range(max(0, int(lines) - 1)):
        parts.append(skeleton('text'))
    return format_html(
        '<div class="card card--outlined skeleton-card" aria-busy="true" aria-live="polite">'
        '<span class="sr-only">Loading...</span>{}</div>',
        format_html_join('', '{}', ((part,) for part in parts)),
    )


@register.simple_tag
def skeleton_text(lines=3):
    lines = max(1, int(lines))
    parts = [skeleton('text', width='80%' if index == lines - 1 else '100%') for index in range(lines)]
    return format_html(
        '<div class="skeleton-text" aria-busy="true" aria-live="polite">{}</div>',
        format_html_join('', '{}', ((part,) for part in parts)),
    )


@register.simple_tag
def skeleton_list(count=3, has_avatar=True):
    """Loading rows for a list: optional avatar circle, two text lines and an icon."""
    rows = []
    for _ in range(max(0, int(count))):
        rows.append(format_html(
            '<div class="skeleton-list__row">{}<div class="skeleton-list__body">{}{}</div>{}</div>',
            skeleton('circular', width=40, height=40) if has_avatar else '',
            skeleton('text', width='40%'),
            skeleton('text', width='70%'),
            skeleton('rounded', width=24, height=24),
        ))
    return format_html(
        '<div class="skeleton-list" aria-busy="true" aria-live="polite">'
        '<span class="sr-only">Loading...</span>{}</div>',
        format_html_join('', '{}', ((row,) for row in rows)),
    )


# Filters

@register.filter
def currency(amount, code='INR'):
    if amount in (None, ''):
        return ''
    return formatting.format_currency(amount, code)


@register.filter
def compact_number(value):
    return formatting.format_number(value or 0)


@register.filter
def long_date(value):
    return formatting.format_date(value) if value else ''


@register.filter
def relative_time(value):
    return formatting.format_relative_time(value) if value else ''


@register.filter
def progress(raised, needed):
    return formatting.calculate_progress(raised or 0, needed or 0)


@register.filter
def truncate_text(value, length):
    return formatting.truncate_text(value or '', int(length))


@register.filter
def initials(value):
    return formatting.get_initials(value or '')


@register.filter
def need_category_label(value):
    return formatting.get_need_category_label(value)


@register.filter
def school_type_label(value):
    return formatting.get_school_type_label(value)


@register.filter
def priority_classes(value):
    return formatting.get_need_priority_classes(value)
