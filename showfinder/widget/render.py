import logging

from showfinder.services.templates import templates

logger = logging.getLogger(__name__)

# markup for a single show, including the button that fetches its episodes
def generate_show_html(show) -> str:
    return templates.get_template("partials/show.html").render(show=show)

# clear the shows list and fill it with one fragment per show
def populate_shows(shows_region, shows):
    shows_region.empty()

    for show in shows:
        shows_region.append(generate_show_html(show))
    logger.debug(f"{shows_region.element_id}: rendered {len(shows)} shows")

# clear the episodes list, write all episodes in one pass, then reveal and scroll to them
def populate_episodes(episodes_region, area_region, episodes):
    episodes_region.empty()
    episodes_html = templates.get_template("partials/episodes.html").render(episodes=episodes)
    episodes_region.set_html(episodes_html)
    area_region.show()
    episodes_region.scroll_into_view()
    logger.debug(f"{episodes_region.element_id}: rendered {len(episodes)} episodes")
