import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='ContentItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(help_text='First characters of the originating prompt', max_length=255)),
                ('content', models.TextField(help_text='Generated body text')),
                ('type', models.CharField(choices=[('blog', 'Blog'), ('facebook', 'Facebook'), ('script', 'Script')], help_text='Content type classified from the prompt', max_length=50)),
                ('model', models.CharField(blank=True, help_text='Model id that generated this content', max_length=100, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='content_items', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Content Item',
                'verbose_name_plural': 'Content Items',
                'db_table': 'content_items',
                'ordering': ['id'],
            },
        ),
    ]
