from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Video",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("title", models.CharField(max_length=100, unique=True)),
                ("description", models.TextField(blank=True, default="")),
                ("category", models.CharField(blank=True, choices=[("Action", "Action"), ("Comedy", "Comedy"), ("Documentary", "Documentary"), ("Drama", "Drama"), ("Educational", "Educational"), ("Fitness", "Fitness"), ("Live", "Live"), ("Music", "Music"), ("Sports", "Sports"), ("Other", "Other")], max_length=50, null=True)),
                ("is_premium", models.BooleanField(default=False, help_text="Premium videos require an active subscription to play.")),
                ("hls_url", models.URLField(blank=True, default="", help_text="Upstream HLS master manifest URL.", max_length=500)),
                ("thumbnail_url", models.URLField(blank=True, default="", max_length=500)),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
    ]
