def register_blueprints(app):
    from weather_api.routes.health import health_bp
    from weather_api.routes.weather import weather_bp
    from weather_api.routes.views import views_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(weather_bp, url_prefix='/api/weather')
    app.register_blueprint(views_bp)
