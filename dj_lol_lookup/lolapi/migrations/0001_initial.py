from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Champion',
            fields=[
                ('id', models.IntegerField(primary_key=True, serialize=False)),
                ('key', models.CharField(max_length=255)),
                ('name', models.CharField(max_length=255)),
                ('title', models.CharField(max_length=255)),
                ('thumbnail_url', models.CharField(blank=True, default='', max_length=255)),
                ('splash_url', models.CharField(blank=True, default='', max_length=255)),
                ('version', models.CharField(max_length=255)),
            ],
        ),
        migrations.CreateModel(
            name='Match',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('match_id', models.CharField(max_length=64, unique=True)),
                ('data_version', models.CharField(blank=True, default='', max_length=16)),
                ('platform_id', models.CharField(blank=True, default='', max_length=16)),
                ('game_mode', models.CharField(blank=True, default='', max_length=64)),
                ('game_type', models.CharField(blank=True, default='', max_length=64)),
                ('game_creation', models.BigIntegerField(default=0)),
                ('game_duration', models.IntegerField(default=0)),
                ('game_version', models.CharField(blank=True, default='', max_length=64)),
                ('queue_id', models.IntegerField(default=0)),
            ],
        ),
        migrations.CreateModel(
            name='Summoner',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('puuid', models.CharField(max_length=78, unique=True)),
                ('game_name', models.CharField(max_length=255)),
                ('tag_line', models.CharField(max_length=255)),
                ('region', models.CharField(max_length=16)),
                ('summoner_id', models.CharField(max_length=63, null=True)),
                ('profile_icon_id', models.IntegerField(default=0)),
                ('summoner_level', models.IntegerField(default=0)),
                ('revision_date', models.BigIntegerField(null=True)),
                ('profile_updated_at', models.DateTimeField(null=True)),
                ('matches_updated_at', models.DateTimeField(null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'indexes': [models.Index(fields=['game_name', 'tag_line'], name='lolapi_summoner_riot_id_idx')],
            },
        ),
        migrations.CreateModel(
            name='MatchTeam',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('team_id', models.IntegerField()),
                ('win', models.BooleanField(default=False)),
                ('champion_kills', models.IntegerField(null=True)),
                ('tower_kills', models.IntegerField(null=True)),
                ('inhibitor_kills', models.IntegerField(null=True)),
                ('baron_kills', models.IntegerField(null=True)),
                ('dragon_kills', models.IntegerField(null=True)),
                ('match', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='teams', to='lolapi.match')),
            ],
            options={
                'unique_together': {('match', 'team_id')},
            },
        ),
        migrations.CreateModel(
            name='MatchParticipant',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('champion_id', models.IntegerField(default=0)),
                ('champion_name', models.CharField(blank=True, default='', max_length=64)),
                ('team_id', models.IntegerField()),
                ('team_position', models.CharField(blank=True, default='', max_length=16)),
                ('team_participant_id', models.CharField(max_length=64, null=True)),
                ('win', models.BooleanField(default=False)),
                ('kills', models.IntegerField(default=0)),
                ('deaths', models.IntegerField(default=0)),
                ('assists', models.IntegerField(default=0)),
                ('total_damage_dealt_to_champions', models.IntegerField(default=0)),
                ('total_damage_taken', models.IntegerField(default=0)),
                ('total_heal', models.IntegerField(default=0)),
                ('gold_earned', models.IntegerField(default=0)),
                ('total_minions_killed', models.IntegerField(default=0)),
                ('neutral_minions_killed', models.IntegerField(default=0)),
                ('vision_score', models.IntegerField(default=0)),
                ('total_time_cc_dealt', models.IntegerField(default=0)),
                ('time_ccing_others', models.IntegerField(default=0)),
                ('match', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='participants', to='lolapi.match')),
                ('summoner', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='participations', to='lolapi.summoner')),
            ],
            options={
                'unique_together': {('match', 'summoner')},
            },
        ),
    ]
