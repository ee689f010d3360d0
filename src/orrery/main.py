import logging

from orrery.algorithms.core.geometry import distance_to_focus, orbital_period
from orrery.algorithms.initializer import initialize_scene
from orrery.logging_config import setup_logging
from orrery.utils.plot import plot_lagrange_points, plot_scene
from orrery.utils.solar_system import solar_system_catalog


if __name__ == "__main__":

    setup_logging()
    logger = logging.getLogger("orrery.main")

    def describe_body(scene, body_id):
        catalog = scene.catalog
        body = catalog[body_id]
        position = scene.position(body_id)
        if body.is_primary:
            logger.info("%-9s primary at (%.1f, %.1f) px", body_id, position.x, position.y)
            return
        nu = scene.true_anomaly(body_id)
        logger.info("%-9s nu=%7.2f deg  r=%.4e km  pos=(%.1f, %.1f) px  T=%.1f h",
                    body_id, nu, distance_to_focus(body, nu), position.x, position.y,
                    orbital_period(body, catalog.orbited_body(body)))

    catalog = solar_system_catalog()
    scene = initialize_scene(catalog)

    for body in catalog.topological_order():
        describe_body(scene, body.id)

    for point in scene.lagrange_points("earth"):
        logger.info("%s at (%.2f, %.2f) px", point.type.name, point.x, point.y)

    plot_scene(scene, body_ids=["sun", "mercury", "venus", "earth", "mars"])
    plot_lagrange_points(scene, "earth")
