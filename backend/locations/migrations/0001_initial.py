# Generated migration for initial locations app setup

import django.contrib.gis.db.models.fields
import django.core.validators
import django.db.models.deletion
import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Country',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255, unique=True)),
                ('code', models.CharField(
                    help_text='ISO 3166-1 alpha-2 code',
                    max_length=2,
                    unique=True,
                    validators=[django.core.validators.RegexValidator(
                        message='Country code must be exactly 2 uppercase characters (ISO 3166-1 alpha-2)',
                        regex='^[A-Z]{2}$',
                    )],
                )),
                ('flag', models.CharField(blank=True, help_text='Country flag emoji', max_length=20, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'locations_country',
                'ordering': ['name'],
                'verbose_name_plural': 'countries',
            },
        ),
        migrations.CreateModel(
            name='Tag',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255, unique=True)),
                ('icon_prefix', models.CharField(blank=True, max_length=255, null=True)),
                ('icon_suffix', models.CharField(blank=True, max_length=255, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'locations_tag',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Location',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('external_id', models.CharField(
                    help_text='Unique ID from source provider (e.g. Foursquare place id)',
                    max_length=255,
                    unique=True,
                )),
                ('name', models.CharField(help_text='The official name of the place', max_length=255)),
                ('address', models.CharField(help_text='Human readable physical address', max_length=512)),
                ('description', models.TextField(blank=True, null=True)),
                ('links', models.JSONField(blank=True, default=list, help_text='List of link strings such as website or phone')),
                ('location', django.contrib.gis.db.models.fields.PointField(
                    geography=True,
                    help_text='PostGIS geography point (SRID=4326) stored as Longitude/Latitude',
                    srid=4326,
                )),
                ('icon_prefix', models.CharField(blank=True, max_length=255, null=True)),
                ('icon_suffix', models.CharField(blank=True, max_length=255, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('country', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='locations', to='locations.country')),
            ],
            options={
                'db_table': 'locations_location',
            },
        ),
        migrations.CreateModel(
            name='PlaceTag',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('location', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='place_tags', to='locations.location')),
                ('tag', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='place_tags', to='locations.tag')),
            ],
            options={
                'db_table': 'locations_place_tag',
            },
        ),
        migrations.AddField(
            model_name='location',
            name='tags',
            field=models.ManyToManyField(related_name='locations', through='locations.PlaceTag', to='locations.tag'),
        ),
        migrations.AddConstraint(
            model_name='placetag',
            constraint=models.UniqueConstraint(fields=('location', 'tag'), name='unique_place_tag'),
        ),
    ]
