"""Pet-tracking sensor sightings with reverse-geocoded place enrichment."""
