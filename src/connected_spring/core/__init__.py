"""Physics core: force elements, bodies, chain, histories."""
